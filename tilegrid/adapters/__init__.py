# -*- coding: utf-8 -*-
"""
Collaborators of the grid engine: input translation and best-score persistence.
"""

from .keyboard import KEY_BINDINGS, InputAdapter, direction_from_key, direction_from_swipe
from .store import JsonScoreStore, MemoryScoreStore, ScoreStore

__all__ = [
    "KEY_BINDINGS",
    "InputAdapter",
    "direction_from_key",
    "direction_from_swipe",
    "ScoreStore",
    "MemoryScoreStore",
    "JsonScoreStore",
]
