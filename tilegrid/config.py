"""
Configuration for a game of tilegrid.
"""

from dataclasses import dataclass, field
from pathlib import Path

from tilegrid.core.gameboard import SPAWN_PROBS, SPAWN_VALUES, SUPER_TILE


@dataclass
class GameConfig:
    """
    Settings shared by the engine, the input adapter and the best-score store.
    """

    # ##>: Board.
    size: int = 4  # Side of the square grid
    start_tiles: int = 2  # Tiles spawned by a new game

    # ##>: Spawning.
    spawn_values: tuple[int, ...] = SPAWN_VALUES
    spawn_probs: tuple[float, ...] = SPAWN_PROBS

    # ##>: Input.
    swipe_threshold: float = 30.0  # Minimum swipe length, in device-independent pixels

    # ##>: Best score persistence.
    best_score_path: Path = field(default_factory=lambda: Path.home() / '.tilegrid' / 'best_score.json')
    best_score_key: str = '2048-best-score'

    # ##>: Display.
    super_tile: int = SUPER_TILE  # Tiles above this value share one style


def default_config() -> GameConfig:
    """
    Create the default configuration.

    Returns
    -------
    GameConfig
        A 4x4 game with the classic spawn odds.
    """
    return GameConfig()
