"""
Move directions and legal-move detection for the sliding-tile game.
"""

from enum import Enum

from numpy import ndarray


class Direction(str, Enum):
    """
    Direction of a move.

    LEFT, UP, RIGHT, DOWN are declared in the order of the quarter turns (``numpy.rot90``) that bring
    each of them onto a left move.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def rotation(self) -> int:
        """Number of counter-clockwise quarter turns mapping this direction onto a left move."""
        return _ROTATIONS[self]


_ROTATIONS = {Direction.LEFT: 0, Direction.UP: 1, Direction.RIGHT: 2, Direction.DOWN: 3}


def parse_direction(value: 'Direction | str') -> Direction:
    """
    Convert a value into a direction.

    Parameters
    ----------
    value : Direction | str
        A direction or its case-insensitive name.

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    ValueError
        If the value names no direction.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f'Unknown direction: {value!r}')


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    # ##>: Horizontal and vertical merges are shared by opposite directions.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A slide needs an empty cell on the destination side of a tile.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(state: ndarray) -> list[Direction]:
    """Return the directions whose move would change the board."""
    mask = legal_actions_mask(state)
    return [direction for direction, legal in zip(Direction, mask) if legal]
