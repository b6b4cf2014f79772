"""2048 engine: owns one game and applies moves, undo and restart to it."""

import logging

from numpy import array_equal, asarray, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from game2048.config import EngineConfig
from game2048.core.gameboard import fill_cells, is_done, latent_state
from game2048.core.gamemove import Direction, legal_actions

from .state import GameState, MoveResult, Snapshot

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Engine:
    """
    2048 game engine.

    The engine owns a single ``GameState`` and is the only thing that mutates it. A presentation
    layer sends one direction per user intent to ``move`` and reads back ``board``, ``score``,
    ``game_over`` and ``can_undo`` to draw the game.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: Generator | None = None,
        state: GameState | None = None,
    ):
        """
        Initialize the engine, drawing a fresh game unless a state is given.

        Parameters
        ----------
        config : EngineConfig, optional
            Engine parameters (default is ``EngineConfig()``).
        rng : Generator, optional
            Random source of the spawner. Built from ``config.seed`` when omitted.
        state : GameState, optional
            Position to start from. A fresh game is drawn when omitted.
        """
        self.config = config if config is not None else EngineConfig()
        self._rng = rng if rng is not None else default_rng(self.config.seed)
        self._state = state if state is not None else self._new_state()

    @classmethod
    def from_board(
        cls,
        board,
        score: int = 0,
        config: EngineConfig | None = None,
        rng: Generator | None = None,
    ) -> 'Engine':
        """
        Build an engine positioned on a given board, with an empty history.

        Parameters
        ----------
        board : array_like
            A 4x4 grid of zeros (empty) and powers of two.
        score : int, optional
            Score of the position (default is 0).
        config : EngineConfig, optional
            Engine parameters.
        rng : Generator, optional
            Random source of the spawner.

        Raises
        ------
        ValueError
            If the board has the wrong shape, holds a value that is not an integer power of two,
            or the score is negative.
        """
        config = config if config is not None else EngineConfig()
        size = config.size

        raw = asarray(board)
        if raw.dtype.kind not in 'iuf':
            raise ValueError(f'Board cells must be numbers, got dtype {raw.dtype}')
        if raw.dtype.kind == 'f' and not (raw == raw.astype(int64)).all():
            raise ValueError('Board cells must be integers')
        grid = raw.astype(int64)

        if grid.shape != (size, size):
            raise ValueError(f'Board must be {size}x{size}, got shape {grid.shape}')
        tiles = grid[grid != 0]
        if (tiles < 2).any() or (tiles & (tiles - 1)).any():
            raise ValueError('Board cells must be empty or powers of two >= 2')
        if score < 0:
            raise ValueError(f'Score must be non-negative, got {score}')

        return cls(config=config, rng=rng, state=GameState(board=grid, score=score, game_over=is_done(grid)))

    @property
    def state(self) -> GameState:
        """The game state owned by the engine. Treat it as read-only."""
        return self._state

    @property
    def board(self) -> ndarray:
        """A copy of the current board."""
        return self._state.board.copy()

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def can_undo(self) -> bool:
        return bool(self._state.history)

    @property
    def history_depth(self) -> int:
        return len(self._state.history)

    @property
    def max_tile(self) -> int:
        return int(self._state.board.max())

    @property
    def legal_moves(self) -> list[Direction]:
        """
        Directions that would change the board. Empty once the game is over.
        """
        if self._state.game_over:
            return []
        return legal_actions(self._state.board)

    def move(self, direction: Direction | int | str) -> MoveResult:
        """
        Slide the board in a direction.

        Parameters
        ----------
        direction : Direction | int | str
            The direction to move, as a member, its value or its name.

        Returns
        -------
        MoveResult
            Whether the move was committed, its reward, the end flag and the spawned cells.

        Notes
        -----
        - A move is ignored when the game is over or when it leaves the board unchanged: no
          history entry is pushed and no tile is spawned.
        - A committed move saves the previous board and score for undo, spawns one tile, adds
          the merge score and re-evaluates the end of the game on the new board.
        """
        direction = Direction.coerce(direction)
        state = self._state

        if state.game_over:
            _logger.debug('Ignored move %s: game is over', direction.name)
            return MoveResult(moved=False, game_over=True)

        new_board, reward = latent_state(state.board, direction)
        if array_equal(new_board, state.board):
            _logger.debug('Ignored move %s: board unchanged', direction.name)
            return MoveResult(moved=False)

        state.history.append(Snapshot.capture(state.board, state.score))
        spawned = fill_cells(
            new_board, self.config.spawn_tiles, rng=self._rng, tile_probs=self.config.tile_probs
        )
        state.board = new_board
        state.score += reward
        state.game_over = is_done(new_board)

        _logger.debug('Moved %s: reward=%d, spawned=%s', direction.name, reward, spawned)
        if state.game_over:
            _logger.info('Game over: score=%d, max tile=%d', state.score, self.max_tile)

        return MoveResult(moved=True, reward=reward, game_over=state.game_over, spawned=tuple(spawned))

    def undo(self) -> bool:
        """
        Go back to the position before the last committed move.

        Returns
        -------
        bool
            False if there was nothing to undo.
        """
        state = self._state
        if not state.history:
            _logger.debug('Nothing to undo')
            return False

        snapshot = state.history.pop()
        state.board = snapshot.board.copy()
        state.score = snapshot.score
        state.game_over = False

        _logger.debug('Undo: score=%d, %d moves left in history', state.score, len(state.history))
        return True

    def restart(self, seed: int | None = None) -> None:
        """
        Discard the current game and start a new one.

        Parameters
        ----------
        seed : int, optional
            Reseed the spawner before the new game is drawn.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._state = self._new_state()
        _logger.debug('Restarted game')

    def render(self) -> str:
        """
        Plain-text view of the board, one tab-separated row per line.
        """
        return '\n'.join(' \t'.join(map(str, row)) for row in self._state.board.tolist())

    def _new_state(self) -> GameState:
        size = self.config.size
        board = zeros((size, size), dtype=int64)
        fill_cells(board, self.config.initial_tiles, rng=self._rng, tile_probs=self.config.tile_probs)
        return GameState(board=board)
