"""
Scoring Functions
=================

Score formulas used by the boxes, and the record of a single scoring event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    total = 0.0
    for value in values:
        total += value
    return total / len(values)


def cantor_pairing(x: float, y: float) -> float:
    """
    Cantor's pairing function.

    pairing(x, y) = (x + y)(x + y + 1) / 2 + y

    Not symmetric: pairing(0, 1) == 2 while pairing(1, 0) == 1.
    """
    return (x + y) * (x + y + 1) / 2 + y


@dataclass(frozen=True)
class ScoreEvent:
    """Record of one absorption credited to a player."""
    player: str
    turn: int
    box_index: int
    box_kind: str
    token_weight: float
    points: float

    def __repr__(self) -> str:
        return (
            f"ScoreEvent(turn={self.turn}, player={self.player}, "
            f"box={self.box_kind}#{self.box_index}, "
            f"token={self.token_weight:g}, points={self.points:g})"
        )
