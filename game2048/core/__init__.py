# -*- coding: utf-8 -*-
"""
Board-level rules of 2048: compacting lines, applying moves, spawning tiles, detecting the end
of a game and listing the moves that change the board.
"""

from .gameboard import TILE_SPAWN_PROBS, fill_cells, is_done, latent_state, merge_line, slide_and_merge
from .gamemove import Direction, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "fill_cells",
    "is_done",
    "legal_actions",
    "legal_actions_mask",
    "illegal_actions",
]
