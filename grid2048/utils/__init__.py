# -*- coding: utf-8 -*-
"""
This module provides the graphical window drawing a 2048 board.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
