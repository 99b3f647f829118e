"""
Game session: drives turns of a grid engine and keeps its collaborators up to date.

A turn is move, then spawn if the grid moved, then end-of-game check and best-score update,
then render. Once the game is over every move is ignored until a restart. State changes are
serialized with a lock; renderers run after it is released.
"""

import logging
import threading
from typing import Iterable, Protocol

from tilegrid.adapters.store import MemoryScoreStore, ScoreStore
from tilegrid.core.gamemove import Direction
from tilegrid.envs.engine import GridEngine, Snapshot

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Anything able to draw a game snapshot."""

    def render(self, snapshot: Snapshot, best: int) -> None:
        ...


class GameSession:
    """
    One player's game, from start to game over, across restarts.

    Parameters
    ----------
    engine : GridEngine
        The engine holding the game state.
    store : ScoreStore, optional
        Where the best score is kept (default is an in-memory store).
    renderers : Iterable[Renderer], optional
        Drawn after every state change.
    """

    def __init__(
        self,
        engine: GridEngine,
        store: ScoreStore | None = None,
        renderers: Iterable[Renderer] = (),
    ):
        self.engine = engine
        self.store = store if store is not None else MemoryScoreStore()
        self.renderers = list(renderers)
        self.best = self.store.load_best()
        self.game_over = False
        self._lock = threading.Lock()

    def start(self, seed: int | None = None) -> Snapshot:
        """
        Start a new game and draw it.

        Parameters
        ----------
        seed : int, optional
            Seed for the engine's generator.

        Returns
        -------
        Snapshot
            The state of the new game.
        """
        with self._lock:
            self.engine.reset(seed=seed)
            self.game_over = False
            snapshot, best = self._record_best()
        self._draw(snapshot, best)
        return snapshot

    restart = start

    def play(self, direction: Direction | str) -> bool:
        """
        Play one turn.

        Parameters
        ----------
        direction : Direction | str
            The move to apply.

        Returns
        -------
        bool
            True if the grid moved. Moves are ignored once the game is over.

        Raises
        ------
        ValueError
            If the direction is unknown.
        OSError
            If the new best score cannot be stored; the turn itself is already played.
        """
        with self._lock:
            if self.game_over:
                logger.debug('Game over, move %s ignored', direction)
                return False

            if not self.engine.move(direction):
                return False

            self.engine.spawn_tile()
            if self.engine.terminal:
                self.game_over = True
                logger.info('Game over with score %d', self.engine.score)

            snapshot, best = self._record_best()
        self._draw(snapshot, best)
        return True

    def refresh(self) -> None:
        """Store a new best score if the current one exceeds it, then redraw every renderer."""
        with self._lock:
            snapshot, best = self._record_best()
        self._draw(snapshot, best)

    def _record_best(self) -> tuple[Snapshot, int]:
        # ##>: self.best only moves once the store accepted the score, so a failed write is retried.
        score = self.engine.score
        if score > self.best:
            self.store.save_best(score)
            self.best = score
            logger.info('New best score: %d', score)
        return self.engine.snapshot(), self.best

    def _draw(self, snapshot: Snapshot, best: int) -> None:
        # ##>: Called without the lock: renderers may pump GUI events that start another turn.
        for renderer in self.renderers:
            renderer.render(snapshot, best)
