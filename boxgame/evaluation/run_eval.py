"""
Evaluation Harness
==================

Plays generated token sequences from the fixed seed bank and summarizes results.

Usage:
    python -m boxgame.evaluation.run_eval [--length N] [--output results.json]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from boxgame.box_core.config_loader import GameConfig, get_config, load_config
from boxgame.box_core.game import CoreGame
from boxgame.box_core.rng import TokenQueue


@dataclass
class EvalResult:
    """Result for a single seed."""
    seed: int
    tokens: List[int]
    score_a: float
    score_b: float
    winner: Optional[str]
    elapsed_time: float


@dataclass
class EvalSummary:
    """Summary of evaluation across all seeds."""
    mean_score_a: float
    mean_score_b: float
    std_score_a: float
    std_score_b: float
    median_score_a: float
    median_score_b: float
    wins_a: int
    wins_b: int
    ties: int
    total_time: float
    results: List[EvalResult]


def load_seed_bank(path: Optional[str] = None) -> List[int]:
    """
    Load the evaluation seed bank.

    Args:
        path: Path to seed_bank.json. Uses default if None.

    Returns:
        List of seeds.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "seed_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    return data["seeds"]


def evaluate_single_seed(
    seed: int,
    length: Optional[int] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = False
) -> EvalResult:
    """
    Play one generated game.

    Args:
        seed: Token queue seed.
        length: Number of tokens. Uses tokens.default_length if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print the result line.

    Returns:
        EvalResult for this seed.
    """
    if config is None:
        config = get_config()

    tokens = TokenQueue(config, seed=seed).take(length)

    start_time = time.time()
    game = CoreGame(config)
    game.play(tokens)
    elapsed = time.time() - start_time

    score_a, score_b = game.scores
    result = EvalResult(
        seed=seed,
        tokens=tokens,
        score_a=score_a,
        score_b=score_b,
        winner=game.winner,
        elapsed_time=elapsed
    )

    if verbose:
        print(f"  Seed {seed}: {game.status_line()}, "
              f"winner={result.winner or 'tie'}")

    return result


def evaluate_seeds(
    seeds: Optional[List[int]] = None,
    length: Optional[int] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> EvalSummary:
    """
    Play one game per seed and aggregate the scores.

    Args:
        seeds: List of seeds. Uses seed_bank.json if None.
        length: Tokens per game. Uses tokens.default_length if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress.

    Returns:
        EvalSummary with aggregate statistics.
    """
    if config is None:
        config = get_config()
    if seeds is None:
        seeds = load_seed_bank()
    if not seeds:
        raise ValueError("At least one seed is required")

    if verbose:
        print(f"Evaluating on {len(seeds)} seeds...")

    results: List[EvalResult] = []
    total_start = time.time()

    for i, seed in enumerate(seeds):
        if verbose:
            print(f"[{i+1}/{len(seeds)}] Running seed {seed}...")
        results.append(
            evaluate_single_seed(seed, length=length, config=config, verbose=verbose)
        )

    total_time = time.time() - total_start

    scores_a = np.array([r.score_a for r in results], dtype=np.float64)
    scores_b = np.array([r.score_b for r in results], dtype=np.float64)
    name_a, name_b = config.players.names

    summary = EvalSummary(
        mean_score_a=float(np.mean(scores_a)),
        mean_score_b=float(np.mean(scores_b)),
        std_score_a=float(np.std(scores_a)),
        std_score_b=float(np.std(scores_b)),
        median_score_a=float(np.median(scores_a)),
        median_score_b=float(np.median(scores_b)),
        wins_a=sum(1 for r in results if r.winner == name_a),
        wins_b=sum(1 for r in results if r.winner == name_b),
        ties=sum(1 for r in results if r.winner is None),
        total_time=total_time,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Seeds evaluated:    {len(seeds)}")
        print(f"Mean score {name_a}:     {summary.mean_score_a:.2f}")
        print(f"Mean score {name_b}:     {summary.mean_score_b:.2f}")
        print(f"Std deviation {name_a}:  {summary.std_score_a:.2f}")
        print(f"Std deviation {name_b}:  {summary.std_score_b:.2f}")
        print(f"Wins {name_a} / {name_b} / ties: "
              f"{summary.wins_a} / {summary.wins_b} / {summary.ties}")
        print(f"Total time:         {total_time:.4f}s")
        print("=" * 50)

    return summary


def save_results(summary: EvalSummary, output_path: str) -> None:
    """Save evaluation results to JSON."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "mean_score_a": summary.mean_score_a,
        "mean_score_b": summary.mean_score_b,
        "std_score_a": summary.std_score_a,
        "std_score_b": summary.std_score_b,
        "median_score_a": summary.median_score_a,
        "median_score_b": summary.median_score_b,
        "wins_a": summary.wins_a,
        "wins_b": summary.wins_b,
        "ties": summary.ties,
        "total_time": summary.total_time,
        "results": [
            {
                "seed": r.seed,
                "tokens": r.tokens,
                "score_a": r.score_a,
                "score_b": r.score_b,
                "winner": r.winner,
                "elapsed_time": r.elapsed_time
            }
            for r in summary.results
        ]
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Results saved to {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the box game over a seed bank")
    parser.add_argument(
        "--seeds",
        type=str,
        default=None,
        help="Path to seed bank JSON (uses default if not specified)"
    )
    parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="Tokens per game (uses tokens.default_length if not specified)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to game_config.yaml"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        seeds = load_seed_bank(args.seeds)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error loading inputs: {e}")
        return 1

    summary = evaluate_seeds(
        seeds=seeds,
        length=args.length,
        config=config,
        verbose=not args.quiet
    )

    if args.output:
        save_results(summary, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
