"""Text rendering of a game, for terminals."""

import sys
from typing import TextIO

from tilegrid.envs.engine import Snapshot


class ConsoleBoard:
    """
    Print the game board, the score and the best score to a text stream.

    Parameters
    ----------
    stream : TextIO, optional
        Where to write (default is ``sys.stdout``).
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def render(self, snapshot: Snapshot, best: int) -> None:
        """Write the grid as tab-separated rows followed by the scores."""
        for row in snapshot.grid.tolist():
            self.stream.write(' \t'.join(str(value) if value else '.' for value in row) + '\n')
        self.stream.write(f'score={snapshot.score} best={best}\n')
        if snapshot.terminal:
            self.stream.write('Game over!\n')
        self.stream.flush()
