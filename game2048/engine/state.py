"""
State held by the 2048 engine.
"""

from dataclasses import dataclass, field

from numpy import ndarray

Cell = tuple[int, int]


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    A committed (board, score) pair kept for undo.

    The board is a read-only copy, so a snapshot cannot change once taken.
    """

    board: ndarray
    score: int

    @classmethod
    def capture(cls, board: ndarray, score: int) -> 'Snapshot':
        frozen = board.copy()
        frozen.setflags(write=False)
        return cls(board=frozen, score=score)


@dataclass
class GameState:
    """
    Everything a game is made of: the board, the score, the end flag and the undo history.
    """

    board: ndarray
    score: int = 0
    game_over: bool = False
    history: list[Snapshot] = field(default_factory=list)


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move.

    Attributes
    ----------
    moved : bool
        Whether the move changed the board and was committed.
    reward : int
        Score gained by the merges of this move (0 when nothing moved).
    game_over : bool
        Whether the game is over after the move.
    spawned : tuple[Cell, ...]
        Cells that received a new tile after the move.
    """

    moved: bool
    reward: int = 0
    game_over: bool = False
    spawned: tuple[Cell, ...] = ()
