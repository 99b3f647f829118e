# -*- coding: utf-8 -*-
"""
Graphical window for the sliding-tile game.

This module draws the game board with Matplotlib and forwards key presses, giving a visual
representation of the game that is refreshed after every turn.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from tilegrid.core.gameboard import SUPER_TILE, is_super_tile
from tilegrid.envs.engine import Snapshot


class WindowBoard:
    """
    Render the game board in a Matplotlib window.

    Methods
    -------
    render(snapshot: Snapshot, best: int)
        Update the display with the current game state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for tile values up to 2048.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }
    SUPER_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int, super_tile: int = SUPER_TILE):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The side of the game board (e.g., 4 for a 4x4 board).
        super_tile : int, optional
            Tiles above this value are drawn with ``SUPER_COLOR`` (default is 2048).
        """
        self.title = title
        self.super_tile = super_tile
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one subplot per cell.

        Parameters
        ----------
        size : int
            The side of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

        self.message = self.fig.text(0.5, 0.5, "", ha="center", va="center", fontsize="xx-large", color="#776E65")

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (unused).
        """
        self.closed = True

    def color(self, value: int) -> str:
        """Return the background color of a tile."""
        if is_super_tile(value, self.super_tile):
            return self.SUPER_COLOR
        return self.COLORS.get(value, "#FFFFFF")

    def render(self, snapshot: Snapshot, best: int):
        """
        Show or update the game board.

        Parameters
        ----------
        snapshot : Snapshot
            The current state of the game.
        best : int
            The best score known so far.
        """
        for ax, text, value in zip(self.axes, self.texts, snapshot.grid.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#F9F6F2" if value > 4 else "#776E65")
            ax.set_facecolor(self.color(value))

        self.fig.suptitle(f"Score: {snapshot.score}    Best: {best}")
        self.message.set_text("Game over!" if snapshot.terminal else "")

        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib key event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
