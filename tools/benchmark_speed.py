"""
Performance Benchmark
=====================

Measures game throughput on generated token sequences.

Usage:
    python -m tools.benchmark_speed [--games N] [--length L]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from boxgame.box_core.config_loader import GameConfig, get_config, load_config
from boxgame.box_core.game import CoreGame
from boxgame.box_core.rng import TokenQueue


def benchmark_core_game(
    num_games: int = 1000,
    length: int = 100,
    seed: int = 42,
    config: Optional[GameConfig] = None
) -> dict:
    """
    Benchmark CoreGame turn throughput.

    Token generation happens before the timer starts.

    Args:
        num_games: Number of games to play.
        length: Tokens per game.
        seed: Seed of the first game; later games use seed + i.
        config: Game configuration. Uses default if None.

    Returns:
        Dict with timing results.
    """
    if config is None:
        config = get_config()

    sequences = [
        TokenQueue(config, seed=seed + i).take(length)
        for i in range(num_games)
    ]

    start = time.perf_counter()
    for tokens in sequences:
        CoreGame(config).play(tokens)
    elapsed = time.perf_counter() - start

    total_turns = num_games * length
    return {
        "num_games": num_games,
        "length": length,
        "elapsed_seconds": elapsed,
        "games_per_second": num_games / elapsed if elapsed > 0 else float("inf"),
        "turns_per_second": total_turns / elapsed if elapsed > 0 else float("inf"),
    }


def run_all_benchmarks(
    lengths: List[int],
    games: int,
    config: Optional[GameConfig] = None
) -> list:
    """Run one benchmark per sequence length."""
    results = []

    print("=" * 60)
    print("BOX GAME PERFORMANCE BENCHMARK")
    print("=" * 60)
    print()

    for length in lengths:
        print(f"Benchmarking CoreGame (length={length})...")
        result = benchmark_core_game(num_games=games, length=length, config=config)
        results.append(result)
        print(f"  Games/sec: {result['games_per_second']:.1f}")
        print(f"  Turns/sec: {result['turns_per_second']:.1f}")
        print()

    print("=" * 60)
    print(f"{'Length':>8} {'Games':>8} {'Games/s':>12} {'Turns/s':>12}")
    print("-" * 44)
    for r in results:
        print(f"{r['length']:>8} {r['num_games']:>8} "
              f"{r['games_per_second']:>12.1f} {r['turns_per_second']:>12.1f}")

    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark box game performance")
    parser.add_argument("--games", type=int, default=1000, help="Games per benchmark")
    parser.add_argument("--length", type=int, nargs="+", default=[8, 100, 1000],
                        help="Token sequence lengths to test")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer games)")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    games = 100 if args.quick else args.games

    run_all_benchmarks(lengths=args.length, games=games, config=config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
