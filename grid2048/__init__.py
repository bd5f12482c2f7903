# -*- coding: utf-8 -*-
"""
Sliding-tile 2048 game: a grid engine with a configurable size and spawn policy.
"""

from .config import GameConfig
from .core import Direction, MoveOutcome, apply_move, is_game_over, spawn_tile
from .envs import GameState, GridEngine

__all__ = [
    "Direction",
    "GameConfig",
    "GameState",
    "GridEngine",
    "MoveOutcome",
    "apply_move",
    "is_game_over",
    "spawn_tile",
]
