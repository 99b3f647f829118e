# -*- coding: utf-8 -*-
"""
tilegrid: the engine of a single-player sliding-tile puzzle (2048).

Tiles slide and merge when equal values collide during a move; the score grows by the value
of every merge and the game ends when no move can change the grid.
"""

from .config import GameConfig, default_config
from .core import Direction
from .envs import GridEngine, Snapshot
from .session import GameSession

__all__ = ["Direction", "GameConfig", "GameSession", "GridEngine", "Snapshot", "default_config"]
