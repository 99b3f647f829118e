"""
Translation of raw input (key names and swipe vectors) into move directions.
"""

from typing import TYPE_CHECKING

from tilegrid.core.gamemove import Direction

if TYPE_CHECKING:
    from tilegrid.session import GameSession

# ##>: Browser and Matplotlib spellings of the arrow keys, plus WASD.
KEY_BINDINGS: dict[str, Direction] = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}

MIN_SWIPE_DISTANCE = 30.0


def direction_from_key(key: str | None) -> Direction | None:
    """Return the direction bound to a key, or None for an unbound key."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def direction_from_swipe(
    start: tuple[float, float], end: tuple[float, float], threshold: float = MIN_SWIPE_DISTANCE
) -> Direction | None:
    """
    Turn a swipe into a direction.

    Parameters
    ----------
    start : tuple[float, float]
        Screen coordinates ``(x, y)`` where the touch began.
    end : tuple[float, float]
        Screen coordinates ``(x, y)`` where the touch ended.
    threshold : float, optional
        Minimum distance along at least one axis (default is 30).

    Returns
    -------
    Direction | None
        The direction of the dominant axis, or None for a swipe shorter than the threshold on both axes.

    Notes
    -----
    - Screen ``y`` grows downwards.
    - When both axes have the same length the swipe counts as vertical.
    """
    diff_x = end[0] - start[0]
    diff_y = end[1] - start[1]

    if abs(diff_x) < threshold and abs(diff_y) < threshold:
        return None

    if abs(diff_x) > abs(diff_y):
        return Direction.RIGHT if diff_x > 0 else Direction.LEFT
    return Direction.DOWN if diff_y > 0 else Direction.UP


class InputAdapter:
    """
    Forward key presses and swipes to a game session.

    Parameters
    ----------
    session : GameSession
        The session receiving the directions.
    threshold : float, optional
        Minimum swipe distance (default from the session configuration).
    """

    def __init__(self, session: 'GameSession', threshold: float | None = None):
        self.session = session
        self.threshold = threshold if threshold is not None else session.engine.config.swipe_threshold

    def handle_key(self, key: str | None) -> bool:
        """
        Play the move bound to a key.

        Returns
        -------
        bool
            True if the grid moved; False for unbound keys, no-op moves and finished games.
        """
        direction = direction_from_key(key)
        if direction is None:
            return False
        return self.session.play(direction)

    def handle_swipe(self, start: tuple[float, float], end: tuple[float, float]) -> bool:
        """
        Play the move matching a swipe.

        Returns
        -------
        bool
            True if the grid moved; False for short swipes, no-op moves and finished games.
        """
        direction = direction_from_swipe(start, end, threshold=self.threshold)
        if direction is None:
            return False
        return self.session.play(direction)
