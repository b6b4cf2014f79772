# -*- coding: utf-8 -*-
"""
Python implementation of the rules of 2048.

This package provides the `Engine` class, which owns a game and applies moves, undo and restart to
it, and the board-level functions it is built on.
"""

from .config import EngineConfig
from .core import Direction, is_done, merge_line
from .engine import Engine, GameState, MoveResult

__all__ = ["Engine", "EngineConfig", "Direction", "GameState", "MoveResult", "is_done", "merge_line"]
