"""
Player
======

Selects the lightest box each turn and accumulates the returned score.
"""

from __future__ import annotations

from typing import List, Sequence

from boxgame.box_core.boxes import Box
from boxgame.box_core.scoring import ScoreEvent


def select_box(boxes: Sequence[Box]) -> int:
    """
    Index of the box with the smallest weight.

    Linear scan with strict comparison, so the earliest box wins ties.

    Raises:
        ValueError: If boxes is empty.
    """
    if not boxes:
        raise ValueError("Cannot select from an empty box collection")

    best = 0
    for i in range(1, len(boxes)):
        if boxes[i] < boxes[best]:
            best = i
    return best


class Player:
    """
    A player's running score and turn history.

    Score starts at 0.0 and only ever grows.
    """

    def __init__(self, name: str):
        self._name = name
        self._score: float = 0.0
        self._history: List[ScoreEvent] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        """Current total score."""
        return self._score

    @property
    def history(self) -> List[ScoreEvent]:
        """Score events of every turn taken, in order."""
        return self._history

    @property
    def turns_taken(self) -> int:
        return len(self._history)

    def get_score(self) -> float:
        return self._score

    def take_turn(self, token_weight: float, boxes: Sequence[Box], turn: int = 0) -> None:
        """
        Feed a token to the lightest box and credit its score.

        Args:
            token_weight: Token to absorb.
            boxes: Live box collection of the session.
            turn: Game-wide turn index, recorded in the score event.
        """
        index = select_box(boxes)
        box = boxes[index]
        points = box.absorb(token_weight)
        self._score += points
        self._history.append(ScoreEvent(
            player=self._name,
            turn=turn,
            box_index=index,
            box_kind=box.kind,
            token_weight=token_weight,
            points=points
        ))

    def __repr__(self) -> str:
        return f"Player({self._name}, score={self._score:g})"
