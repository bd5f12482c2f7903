# -*- coding: utf-8 -*-
"""
This module provides the pure functions of the 2048 grid.

It includes functions for sliding and merging tiles, spawning new tiles under a configurable policy,
checking legal moves and detecting the end of the game.
"""

from .gameboard import (
    InvalidBoardError,
    MoveOutcome,
    apply_move,
    is_game_over,
    merge_line,
    new_board,
    next_state,
    slide_and_merge,
    spawn_tile,
    validate_board,
)
from .gamemove import Direction, illegal_actions, legal_actions
from .spawn import SPAWN_POLICIES, SpawnPolicy, get_policy

__all__ = [
    "Direction",
    "InvalidBoardError",
    "MoveOutcome",
    "SPAWN_POLICIES",
    "SpawnPolicy",
    "apply_move",
    "get_policy",
    "illegal_actions",
    "is_game_over",
    "legal_actions",
    "merge_line",
    "new_board",
    "next_state",
    "slide_and_merge",
    "spawn_tile",
    "validate_board",
]
