"""
Box Core - The game itself.

Main exports:
- play: Play a token sequence and return (score A, score B)
- CoreGame: Step-wise game session
- GreenBox / BlueBox: The two box variants
- Player: Running score and turn history
- TokenQueue: Seeded token weight generator
- GameConfig: Configuration loaded from game_config.yaml
"""

from boxgame.box_core.config_loader import GameConfig, load_config
from boxgame.box_core.scoring import ScoreEvent, cantor_pairing, mean
from boxgame.box_core.boxes import (
    Box,
    GreenBox,
    BlueBox,
    make_box,
    make_green_box,
    make_blue_box,
)
from boxgame.box_core.player import Player, select_box
from boxgame.box_core.rng import TokenQueue, fibonacci_tokens
from boxgame.box_core.state_snapshot import GameSnapshot
from boxgame.box_core.game import (
    STANDARD_LAYOUT,
    CoreGame,
    TurnResult,
    TurnState,
    play,
)

__all__ = [
    "GameConfig",
    "load_config",
    "ScoreEvent",
    "cantor_pairing",
    "mean",
    "Box",
    "GreenBox",
    "BlueBox",
    "make_box",
    "make_green_box",
    "make_blue_box",
    "Player",
    "select_box",
    "TokenQueue",
    "fibonacci_tokens",
    "GameSnapshot",
    "STANDARD_LAYOUT",
    "CoreGame",
    "TurnResult",
    "TurnState",
    "play",
]
