# -*- coding: utf-8 -*-
"""
Renderers for the game: a text board for terminals.

The Matplotlib `WindowBoard` lives in `tilegrid.utils.windows` and is imported on demand.
"""

from .console import ConsoleBoard

__all__ = ["ConsoleBoard"]
