# -*- coding: utf-8 -*-
"""
Pure board functions for the sliding-tile game.

It includes the move directions, line merging, sliding in any direction, tile spawning,
legal-move detection and end-of-game detection.
"""

from .gameboard import (
    SUPER_TILE,
    SPAWN_PROBS,
    SPAWN_VALUES,
    empty_cells,
    fill_cells,
    is_done,
    is_super_tile,
    latent_state,
    max_tile,
    merge_line,
    slide_and_merge,
)
from .gamemove import Direction, legal_actions_mask, legal_directions, parse_direction

__all__ = [
    "Direction",
    "parse_direction",
    "legal_actions_mask",
    "legal_directions",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "empty_cells",
    "fill_cells",
    "is_done",
    "max_tile",
    "is_super_tile",
    "SUPER_TILE",
    "SPAWN_VALUES",
    "SPAWN_PROBS",
]
