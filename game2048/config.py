"""
Configuration of the 2048 engine.
"""

from dataclasses import dataclass, field
from math import isclose

from game2048.core.gameboard import TILE_SPAWN_PROBS

# ##>: The rules are defined for a 4x4 board only.
BOARD_SIZE = 4


@dataclass
class EngineConfig:
    """
    Parameters of an engine instance.

    Attributes
    ----------
    size : int
        Side of the square board. Only 4 is supported.
    initial_tiles : int
        Tiles spawned on a fresh board.
    spawn_tiles : int
        Tiles spawned after each committed move.
    tile_probs : dict[int, float]
        Spawned tile values and their probabilities.
    seed : int, optional
        Seed of the spawner's random generator.
    """

    size: int = BOARD_SIZE
    initial_tiles: int = 2
    spawn_tiles: int = 1
    tile_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    seed: int | None = None

    def __post_init__(self):
        if self.size != BOARD_SIZE:
            raise ValueError(f'Board size is fixed at {BOARD_SIZE}, got {self.size}')
        if self.initial_tiles < 0 or self.spawn_tiles < 0:
            raise ValueError('Tile counts must be non-negative')
        if not self.tile_probs:
            raise ValueError('tile_probs must not be empty')
        for value in self.tile_probs:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f'Spawned tiles must be integers, got {value!r}')
            if value < 2 or value & (value - 1):
                raise ValueError(f'Spawned tiles must be powers of two >= 2, got {value}')
        if not isclose(sum(self.tile_probs.values()), 1.0):
            raise ValueError(f'tile_probs must sum to 1, got {sum(self.tile_probs.values())}')
