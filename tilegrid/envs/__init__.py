# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile game engine.

This module provides the `GridEngine` class, which owns the game state and its transitions.
"""

from .engine import GridEngine, Snapshot

__all__ = ["GridEngine", "Snapshot"]
