"""
Best-score persistence.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from tilegrid.config import GameConfig

logger = logging.getLogger(__name__)


def _check_score(value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f'Best score must be non-negative, got {value}')
    return value


class ScoreStore(ABC):
    """
    Persist the best score across games.
    """

    @abstractmethod
    def load_best(self) -> int:
        """
        Read the best score.

        Returns
        -------
        int
            The stored best score, 0 if none was saved.
        """

    @abstractmethod
    def save_best(self, value: int) -> None:
        """
        Store a new best score.

        Parameters
        ----------
        value : int
            The score to store.
        """


class MemoryScoreStore(ScoreStore):
    """Best score kept for the lifetime of the process."""

    def __init__(self, best: int = 0):
        self._best = _check_score(best)

    def load_best(self) -> int:
        return self._best

    def save_best(self, value: int) -> None:
        self._best = _check_score(value)


class JsonScoreStore(ScoreStore):
    """
    Best score kept in a JSON file, under a single key.

    A missing or unreadable file loads as 0. Parent directories are created on save.

    Parameters
    ----------
    path : Path | str
        Location of the JSON file.
    key : str, optional
        Key of the best score inside the file.
    """

    def __init__(self, path: Path | str, key: str = '2048-best-score'):
        self.path = Path(path)
        self.key = key

    @classmethod
    def from_config(cls, config: GameConfig) -> 'JsonScoreStore':
        """Build a store from the best-score settings of a configuration."""
        return cls(config.best_score_path, key=config.best_score_key)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as error:
            logger.warning('Unreadable best score file %s: %s', self.path, error)
            return {}
        if not isinstance(content, dict):
            logger.warning('Unexpected best score content in %s', self.path)
            return {}
        return content

    def load_best(self) -> int:
        value = self._read().get(self.key, 0)
        try:
            return _check_score(value)
        except (TypeError, ValueError):
            logger.warning('Invalid best score %r in %s', value, self.path)
            return 0

    def save_best(self, value: int) -> None:
        content = self._read()
        content[self.key] = _check_score(value)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(content, indent=2), encoding='utf-8')
