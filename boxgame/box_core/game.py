"""
Core Game
=========

Main game orchestrator: owns the boxes and the two players and resolves turns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from boxgame.box_core.boxes import Box, make_box
from boxgame.box_core.config_loader import GameConfig, get_config
from boxgame.box_core.player import Player
from boxgame.box_core.scoring import ScoreEvent
from boxgame.box_core.state_snapshot import GameSnapshot, build_snapshot


# (kind, initial_weight) in construction order. Order decides tie-breaks.
STANDARD_LAYOUT: Tuple[Tuple[str, float], ...] = (
    ("green", 0.0),
    ("green", 0.1),
    ("blue", 0.2),
    ("blue", 0.3),
)


class TurnState(IntEnum):
    """Whose turn it is. Alternates strictly, starting with the first player."""
    TURN_A = 0
    TURN_B = 1

    def flipped(self) -> "TurnState":
        return TurnState.TURN_B if self is TurnState.TURN_A else TurnState.TURN_A


@dataclass(frozen=True)
class TurnResult:
    """Result of a single turn."""
    event: ScoreEvent
    score_a: float
    score_b: float

    @property
    def player(self) -> str:
        return self.event.player

    @property
    def points(self) -> float:
        return self.event.points


def build_boxes() -> List[Box]:
    """Fresh boxes in the standard layout."""
    return [make_box(kind, weight) for kind, weight in STANDARD_LAYOUT]


def format_status(score_a: float, score_b: float, names: Tuple[str, str] = ("A", "B")) -> str:
    """Human-readable score line, e.g. 'Scores: player A 13, player B 25'."""
    return f"Scores: player {names[0]} {score_a:g}, player {names[1]} {score_b:g}"


class CoreGame:
    """
    Main game session.

    Orchestrates:
    - Four boxes in the standard layout
    - Two players, alternating turns
    - Turn resolution: lightest box absorbs the next token

    One step = one token consumed by the current player.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config

        # Session state, built by reset()
        self._boxes: List[Box]
        self._players: Tuple[Player, Player]
        self._state: TurnState
        self._turns_taken: int
        self.reset()

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def boxes(self) -> List[Box]:
        """Live boxes in construction order."""
        return self._boxes

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def current_player(self) -> Player:
        """Player who takes the next turn."""
        return self._players[self._state]

    @property
    def turns_taken(self) -> int:
        return self._turns_taken

    @property
    def scores(self) -> Tuple[float, float]:
        """(first player score, second player score)."""
        return (self._players[0].score, self._players[1].score)

    @property
    def winner(self) -> Optional[str]:
        """Name of the player with the higher score, or None on a tie."""
        score_a, score_b = self.scores
        if score_a > score_b:
            return self._players[0].name
        if score_b > score_a:
            return self._players[1].name
        return None

    def reset(self) -> GameSnapshot:
        """
        Reset game to initial state.

        Returns:
            Initial game snapshot.
        """
        self._boxes = build_boxes()
        self._players = (
            Player(self._config.players.first),
            Player(self._config.players.second),
        )
        self._state = TurnState.TURN_A
        self._turns_taken = 0
        return self.snapshot()

    def step(self, token_weight: float) -> TurnResult:
        """
        Play one turn.

        Args:
            token_weight: Next input token weight (non-negative).

        Returns:
            TurnResult with the score event and both running scores.
        """
        player = self.current_player
        player.take_turn(token_weight, self._boxes, turn=self._turns_taken)

        self._turns_taken += 1
        self._state = self._state.flipped()

        score_a, score_b = self.scores
        return TurnResult(
            event=player.history[-1],
            score_a=score_a,
            score_b=score_b
        )

    def play(self, input_weights: Iterable[float]) -> List[TurnResult]:
        """Play every token in order, returning one TurnResult per turn."""
        return [self.step(weight) for weight in input_weights]

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        return build_snapshot(
            boxes=self._boxes,
            players=self._players,
            turns_taken=self._turns_taken,
            current_player=self.current_player
        )

    def status_line(self) -> str:
        return format_status(
            *self.scores,
            names=(self._players[0].name, self._players[1].name)
        )

    def get_info(self) -> Dict[str, Any]:
        """Get JSON-friendly summary: the current snapshot plus the winner."""
        info = self.snapshot().to_dict()
        info["winner"] = self.winner
        return info


def play(
    input_weights: Iterable[float],
    config: Optional[GameConfig] = None
) -> Tuple[float, float]:
    """
    Play a full game on the given token weights.

    Args:
        input_weights: Ordered token weights, one per turn.
        config: Game configuration. Uses default if None.

    Returns:
        (score of player A, score of player B).
    """
    game = CoreGame(config)
    game.play(float(weight) for weight in input_weights)

    if game.config.output.print_status:
        print(game.status_line())

    return game.scores
