"""
Play Tokens
===========

Play one game from the command line and print every turn.

Usage:
    python -m tools.play_tokens 1 1 2 3
    python -m tools.play_tokens --fibonacci 8
    python -m tools.play_tokens --seed 42 --length 10
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from boxgame.box_core.config_loader import load_config
from boxgame.box_core.game import CoreGame, TurnResult
from boxgame.box_core.rng import TokenQueue, fibonacci_tokens


def format_turn_table(turns: List[TurnResult]) -> List[str]:
    """Render turn results as fixed-width table lines."""
    lines = [
        f"{'Turn':>4} {'Player':>6} {'Box':>8} {'Token':>8} {'Points':>10} "
        f"{'Score A':>10} {'Score B':>10}",
        "-" * 62,
    ]
    for t in turns:
        e = t.event
        box = f"{e.box_kind}#{e.box_index}"
        lines.append(
            f"{e.turn:>4} {e.player:>6} {box:>8} {e.token_weight:>8g} "
            f"{e.points:>10g} {t.score_a:>10g} {t.score_b:>10g}"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the box game on a token sequence")
    parser.add_argument("tokens", type=float, nargs="*", help="Token weights, in turn order")
    parser.add_argument("--fibonacci", type=int, default=None,
                        help="Use the first N Fibonacci numbers as tokens")
    parser.add_argument("--seed", type=int, default=None, help="Generate tokens from this seed")
    parser.add_argument("--length", type=int, default=None,
                        help="Number of generated tokens (with --seed)")
    parser.add_argument("--config", type=str, default=None, help="Path to game_config.yaml")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    if args.fibonacci is not None:
        tokens = fibonacci_tokens(args.fibonacci)
    elif args.seed is not None:
        tokens = TokenQueue(config, seed=args.seed).take(args.length)
    else:
        tokens = args.tokens

    if any(t < 0 for t in tokens):
        print("Token weights must be non-negative")
        return 1

    game = CoreGame(config)
    turns = game.play(tokens)

    for line in format_turn_table(turns):
        print(line)
    print()
    print(game.status_line())
    winner = game.winner
    print(f"Winner: player {winner}" if winner is not None else "Result: tie")

    return 0


if __name__ == "__main__":
    sys.exit(main())
