"""
Boxes
=====

Stateful accumulators that absorb token weights and emit a score per absorption.

Two variants share the Box contract:
- GreenBox: square of the mean of the 3 most recently absorbed weights
- BlueBox: Cantor pairing of the smallest and largest absorbed weight
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Optional, Tuple, Type

from boxgame.box_core.scoring import cantor_pairing, mean


class Box(ABC):
    """
    Base class for all boxes.

    A box's weight starts at its initial weight and grows by every absorbed
    token weight. Boxes compare by weight, which is how players pick the
    lightest one each turn.
    """

    kind: str = "box"

    def __init__(self, initial_weight: float):
        """
        Initialize box.

        Args:
            initial_weight: Starting weight. Never counts as an absorbed token.
        """
        self._initial_weight = float(initial_weight)
        self._weight = float(initial_weight)
        self._absorb_count: int = 0

    @property
    def weight(self) -> float:
        """Current total weight."""
        return self._weight

    @property
    def initial_weight(self) -> float:
        return self._initial_weight

    @property
    def absorb_count(self) -> int:
        """Number of tokens absorbed so far."""
        return self._absorb_count

    def get_weight(self) -> float:
        return self._weight

    def __lt__(self, other: "Box") -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.get_weight() < other.get_weight()

    def absorb(self, token_weight: float) -> float:
        """
        Absorb a token and return the score for this absorption.

        Args:
            token_weight: Non-negative token weight.

        Returns:
            Score of this single absorption (not cumulative).
        """
        self._weight += token_weight
        self._absorb_count += 1
        self._record(token_weight)
        return self._calculate_score()

    @abstractmethod
    def _record(self, token_weight: float) -> None:
        """Update variant state with a newly absorbed token."""

    @abstractmethod
    def _calculate_score(self) -> float:
        """Score derived from the current variant state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self._weight:g}, absorbed={self._absorb_count})"


class GreenBox(Box):
    """Scores the square of the mean of the last 3 absorbed weights."""

    kind = "green"
    WINDOW_SIZE = 3

    def __init__(self, initial_weight: float):
        super().__init__(initial_weight)
        self._recent: Deque[float] = deque(maxlen=self.WINDOW_SIZE)

    @property
    def recent_weights(self) -> Tuple[float, ...]:
        """Most recent absorbed weights, oldest first."""
        return tuple(self._recent)

    def _record(self, token_weight: float) -> None:
        # deque(maxlen) drops the oldest entry on overflow
        self._recent.append(token_weight)

    def _calculate_score(self) -> float:
        m = mean(self._recent)
        return m * m


class BlueBox(Box):
    """Scores cantor_pairing(smallest, largest) over absorbed weights."""

    kind = "blue"

    def __init__(self, initial_weight: float):
        super().__init__(initial_weight)
        self._min_seen: Optional[float] = None
        self._max_seen: Optional[float] = None

    @property
    def has_absorbed(self) -> bool:
        return self._absorb_count > 0

    @property
    def min_seen(self) -> Optional[float]:
        """Smallest absorbed weight, or None before the first absorption."""
        return self._min_seen

    @property
    def max_seen(self) -> Optional[float]:
        """Largest absorbed weight, or None before the first absorption."""
        return self._max_seen

    def _record(self, token_weight: float) -> None:
        if self._min_seen is None:
            self._min_seen = self._max_seen = token_weight
        else:
            self._min_seen = min(self._min_seen, token_weight)
            self._max_seen = max(self._max_seen, token_weight)

    def _calculate_score(self) -> float:
        return cantor_pairing(self._min_seen, self._max_seen)


BOX_TYPES: Dict[str, Type[Box]] = {
    GreenBox.kind: GreenBox,
    BlueBox.kind: BlueBox,
}


def make_green_box(initial_weight: float) -> GreenBox:
    """Create a green box with the given initial weight."""
    return GreenBox(initial_weight)


def make_blue_box(initial_weight: float) -> BlueBox:
    """Create a blue box with the given initial weight."""
    return BlueBox(initial_weight)


def make_box(kind: str, initial_weight: float) -> Box:
    """
    Create a box by kind name.

    Args:
        kind: "green" or "blue".
        initial_weight: Starting weight.

    Raises:
        ValueError: If kind is unknown.
    """
    try:
        box_type = BOX_TYPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown box kind: {kind!r} (expected one of {sorted(BOX_TYPES)})"
        ) from None
    return box_type(initial_weight)
