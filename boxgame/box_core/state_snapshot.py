"""
State Snapshot
==============

Read-only view of a game session for display and analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from boxgame.box_core.boxes import Box
from boxgame.box_core.player import Player


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable snapshot of a session.

    Box arrays follow box construction order.
    """
    box_kinds: Tuple[str, ...]
    box_weights: np.ndarray       # float64, one entry per box
    box_absorb_counts: np.ndarray # int32, one entry per box
    player_names: Tuple[str, str]
    scores: Tuple[float, float]
    turns_taken: int
    current_player: str

    @property
    def lightest_box(self) -> int:
        """Index of the box the next turn will use (first on ties)."""
        return int(np.argmin(self.box_weights))

    @property
    def total_weight(self) -> float:
        return float(self.box_weights.sum())

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "box_kinds": list(self.box_kinds),
            "box_weights": self.box_weights.tolist(),
            "box_absorb_counts": self.box_absorb_counts.tolist(),
            "total_weight": self.total_weight,
            "lightest_box": self.lightest_box,
            "player_names": list(self.player_names),
            "scores": list(self.scores),
            "turns_taken": self.turns_taken,
            "current_player": self.current_player,
        }


def build_snapshot(
    boxes: Sequence[Box],
    players: Sequence[Player],
    turns_taken: int,
    current_player: Optional[Player] = None
) -> GameSnapshot:
    """Build a snapshot from live session objects."""
    if current_player is None:
        current_player = players[turns_taken % len(players)]

    weights = np.array([box.weight for box in boxes], dtype=np.float64)
    counts = np.array([box.absorb_count for box in boxes], dtype=np.int32)
    # Snapshots are read-only
    weights.setflags(write=False)
    counts.setflags(write=False)

    return GameSnapshot(
        box_kinds=tuple(box.kind for box in boxes),
        box_weights=weights,
        box_absorb_counts=counts,
        player_names=(players[0].name, players[1].name),
        scores=(players[0].score, players[1].score),
        turns_taken=turns_taken,
        current_player=current_player.name
    )
