"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml


@dataclass(frozen=True)
class PlayersConfig:
    """Player names in turn order."""
    names: Tuple[str, ...]

    @property
    def first(self) -> str:
        return self.names[0]

    @property
    def second(self) -> str:
        return self.names[1]


@dataclass(frozen=True)
class TokenConfig:
    """Token generation parameters."""
    min_weight: int       # Smallest token weight (inclusive)
    max_weight: int       # Largest token weight (inclusive)
    default_length: int   # Tokens per generated game


@dataclass(frozen=True)
class OutputConfig:
    """Console output settings."""
    print_status: bool


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    players: PlayersConfig
    tokens: TokenConfig
    output: OutputConfig


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    names = config.players.names
    if len(names) != 2:
        raise ValueError(f"Exactly 2 player names are required, got {len(names)}")
    if any(not name for name in names):
        raise ValueError("Player names must be non-empty")
    if names[0] == names[1]:
        raise ValueError(f"Player names must be distinct, got {names[0]!r} twice")

    tokens = config.tokens
    if tokens.min_weight < 0:
        raise ValueError(f"tokens.min_weight must be >= 0, got {tokens.min_weight}")
    if tokens.min_weight > tokens.max_weight:
        raise ValueError(
            f"tokens.min_weight ({tokens.min_weight}) exceeds "
            f"tokens.max_weight ({tokens.max_weight})"
        )
    if tokens.default_length < 0:
        raise ValueError(f"tokens.default_length must be >= 0, got {tokens.default_length}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    players_data = raw.get("players", {})
    players = PlayersConfig(
        names=tuple(str(n) for n in players_data.get("names", ["A", "B"]))
    )

    tokens_data = raw.get("tokens", {})
    tokens = TokenConfig(
        min_weight=int(tokens_data.get("min_weight", 0)),
        max_weight=int(tokens_data.get("max_weight", 21)),
        default_length=int(tokens_data.get("default_length", 8))
    )

    output_data = raw.get("output", {})
    output = OutputConfig(
        print_status=bool(output_data.get("print_status", True))
    )

    config = GameConfig(
        players=players,
        tokens=tokens,
        output=output
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
