# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GridEngine` class, which owns the game board and runs the turns of a game.
"""

from .engine import GameState, GridEngine, StepResult

__all__ = ["GameState", "GridEngine", "StepResult"]
