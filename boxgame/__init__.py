"""
Box Game
========

A two-player turn-based scoring game played against four "box" accumulators.

- box_core: boxes, players, turn resolution, configuration, token RNG
- evaluation: seed-bank harness for playing many generated games

The box layout and scoring rules are fixed; tunable parameters (player
names, token generation, console output) are in game_config.yaml.
"""
