"""Grid engine: the game state of a sliding-tile game and its transitions."""

import logging
from dataclasses import dataclass
from typing import Sequence

from numpy import array_equal, asarray, count_nonzero, floor, int64, isfinite, ndarray, zeros
from numpy.random import Generator, default_rng

from tilegrid.config import GameConfig, default_config
from tilegrid.core.gameboard import fill_cells, is_done, latent_state, max_tile, shared_generator
from tilegrid.core.gamemove import Direction, legal_directions, parse_direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game, handed to renderers."""

    grid: ndarray
    score: int
    terminal: bool
    max_tile: int


class GridEngine:
    """
    Sliding-tile game engine.

    The engine owns the grid, the score and the terminal flag. The grid only changes through
    ``initialize``, ``move`` and ``spawn_tile``. Moves never spawn: callers spawn a tile after a move
    that returned True. The engine holds no lock and must be driven from a single thread.
    """

    def __init__(
        self,
        size: int | None = None,
        seed: int | None = None,
        rng: Generator | None = None,
        config: GameConfig | None = None,
    ):
        """
        Initialize an empty engine.

        Parameters
        ----------
        size : int, optional
            Side of the square grid (default from the configuration, 4).
        seed : int, optional
            Seed for a private random generator.
        rng : Generator, optional
            Random generator used for spawning; takes precedence over ``seed``.
        config : GameConfig, optional
            Game settings (default is ``default_config()``).
        """
        self.config = config or default_config()
        self.size = size if size is not None else self.config.size

        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = default_rng(seed)
        else:
            self._rng = shared_generator()

        self._board: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._terminal = False
        self.initialize()

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[int]] | ndarray,
        score: int = 0,
        rng: Generator | None = None,
        config: GameConfig | None = None,
    ) -> 'GridEngine':
        """
        Build an engine positioned on an existing grid.

        Parameters
        ----------
        grid : Sequence[Sequence[int]] | ndarray
            A square grid of empty cells (0) and powers of two.
        score : int, optional
            Score reached so far (default is 0).
        rng : Generator, optional
            Random generator used for spawning.
        config : GameConfig, optional
            Game settings.

        Returns
        -------
        GridEngine
            An engine holding a copy of the grid.

        Raises
        ------
        ValueError
            If the grid is not square, does not match the configured size, holds a value that is not an
            integer, or a value other than 0 and 2, 4, 8, ... , or if the score is negative.
        """
        values = asarray(grid)
        if values.dtype.kind not in 'iuf':
            raise ValueError(f'Grid values must be numbers, received {values.dtype}')
        if values.dtype.kind == 'f' and not (isfinite(values) & (values == floor(values))).all():
            raise ValueError('Grid values must be integers')

        board = values.astype(int64)
        if board.ndim != 2 or board.shape[0] != board.shape[1]:
            raise ValueError(f'Expected a square grid, received shape {board.shape}')
        if config is not None and board.shape[0] != config.size:
            raise ValueError(f'Expected a {config.size}x{config.size} grid, received shape {board.shape}')
        if (board < 0).any():
            raise ValueError('Grid values must be non-negative')
        # ##>: 1 is 2**0 but is not a tile.
        if ((board == 1) | ((board & (board - 1)) != 0)).any():
            raise ValueError('Grid values must be 0 or a power of two from 2')
        if score < 0:
            raise ValueError(f'Score must be non-negative, got {score}')

        engine = cls(size=board.shape[0], rng=rng, config=config)
        engine._board = board
        engine._score = int(score)
        engine._terminal = is_done(board)
        return engine

    @property
    def grid(self) -> ndarray:
        """
        Get a read-only copy of the grid.

        Returns
        -------
        ndarray
            The grid as a non-writeable 2D array.
        """
        board = self._board.copy()
        board.setflags(write=False)
        return board

    @property
    def score(self) -> int:
        """Score accumulated since the last ``initialize``."""
        return self._score

    @property
    def terminal(self) -> bool:
        """Terminal flag, recomputed after every spawn."""
        return self._terminal

    def get_grid(self) -> ndarray:
        """Return a read-only copy of the grid."""
        return self.grid

    def get_score(self) -> int:
        """Return the current score."""
        return self._score

    def snapshot(self) -> Snapshot:
        """Return a read-only view of the game for renderers."""
        return Snapshot(grid=self.grid, score=self._score, terminal=self._terminal, max_tile=max_tile(self._board))

    def initialize(self) -> None:
        """
        Empty the grid and reset the score and the terminal flag.

        The previous grid is replaced entirely.
        """
        self._board = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._terminal = False

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: empty the grid and spawn the starting tiles.

        Parameters
        ----------
        seed : int, optional
            Re-seed the engine's generator before spawning.

        Returns
        -------
        ndarray
            A read-only copy of the new grid.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self.initialize()
        for _ in range(self.config.start_tiles):
            self.spawn_tile()

        logger.info('New %dx%d game started', self.size, self.size)
        return self.grid

    def spawn_tile(self) -> None:
        """
        Place a new tile in a random empty cell.

        The cell is chosen uniformly among the empty ones; the tile is 2 with probability 0.9, 4 otherwise.
        Does nothing on a full grid. The terminal flag is recomputed afterwards.
        """
        before = count_nonzero(self._board)
        fill_cells(
            self._board,
            number_tile=1,
            rng=self._rng,
            values=self.config.spawn_values,
            probs=self.config.spawn_probs,
        )
        if count_nonzero(self._board) == before:
            logger.debug('No empty cell, spawn skipped')

        self._terminal = is_done(self._board)

    def move(self, direction: Direction | str) -> bool:
        """
        Slide and merge every line towards ``direction``.

        Parameters
        ----------
        direction : Direction | str
            The move to apply.

        Returns
        -------
        bool
            True if any cell changed value or position.

        Raises
        ------
        ValueError
            If the direction is unknown; the grid is left untouched.

        Notes
        -----
        - Each merge adds the merged value to the score.
        - No tile is spawned here.
        """
        direction = parse_direction(direction)

        new_board, gained = latent_state(self._board, direction)
        moved = not array_equal(new_board, self._board)
        if moved:
            self._board = new_board
            self._score += gained
            logger.debug('Moved %s, gained %d', direction.value, gained)
        return moved

    def is_terminal(self) -> bool:
        """
        Check whether no move can change the grid.

        Returns
        -------
        bool
            True when the grid is full and no two adjacent cells are equal. Does not update ``terminal``.
        """
        return is_done(self._board)

    def legal_directions(self) -> list[Direction]:
        """Return the directions whose move would change the grid."""
        return legal_directions(self._board)
