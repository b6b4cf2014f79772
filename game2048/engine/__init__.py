# -*- coding: utf-8 -*-
"""
The 2048 engine and the state it owns.
"""

from .engine import Engine
from .state import GameState, MoveResult, Snapshot

__all__ = ["Engine", "GameState", "MoveResult", "Snapshot"]
