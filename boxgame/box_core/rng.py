"""
RNG - Token Queue
=================

Provides deterministic token weight sequences for generated games.
"""

from __future__ import annotations

import random
from typing import List, Optional

from boxgame.box_core.config_loader import GameConfig, get_config


def fibonacci_tokens(count: int) -> List[int]:
    """
    First `count` Fibonacci numbers starting 1, 1, 2, 3, ...

    These are the reference inputs of the classic box game test cases.
    """
    tokens: List[int] = []
    a, b = 1, 1
    for _ in range(count):
        tokens.append(a)
        a, b = b, a + b
    return tokens


class TokenQueue:
    """
    Seeded queue of integer token weights.

    Weights are drawn uniformly from [tokens.min_weight, tokens.max_weight].
    The same seed always yields the same sequence.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize token queue.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._rng = random.Random(seed)
        self._buffer: List[int] = []
        self._drawn: int = 0

    def _draw(self) -> int:
        return self._rng.randint(
            self._config.tokens.min_weight,
            self._config.tokens.max_weight
        )

    def _fill(self, count: int) -> None:
        while len(self._buffer) < count:
            self._buffer.append(self._draw())

    @property
    def current_token(self) -> int:
        """Token that the next advance() will return."""
        self._fill(1)
        return self._buffer[0]

    @property
    def tokens_drawn(self) -> int:
        """Number of tokens consumed so far."""
        return self._drawn

    def advance(self) -> int:
        """
        Consume and return the current token.

        Returns:
            The token weight that was current.
        """
        self._fill(1)
        self._drawn += 1
        return self._buffer.pop(0)

    def peek(self, count: int = 2) -> List[int]:
        """
        Peek at upcoming tokens without consuming.

        Args:
            count: Number of upcoming tokens to peek.

        Returns:
            List of upcoming token weights.
        """
        self._fill(count)
        return self._buffer[:count]

    def take(self, count: Optional[int] = None) -> List[int]:
        """
        Consume several tokens at once.

        Args:
            count: Number of tokens. Uses tokens.default_length if None.
        """
        if count is None:
            count = self._config.tokens.default_length
        return [self.advance() for _ in range(count)]

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the queue with optional new seed.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)
        self._buffer = []
        self._drawn = 0
