"""
Core board functions for the sliding-tile game: line merging, sliding, spawning and end-of-game detection.
"""

from typing import Sequence

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from tilegrid.core.gamemove import Direction, parse_direction

# ##>: Spawned tiles: 2 with probability 0.9, 4 with probability 0.1.
SPAWN_VALUES: tuple[int, ...] = (2, 4)
SPAWN_PROBS: tuple[float, ...] = (0.9, 0.1)

# ##>: Tiles above this value share a single display style.
SUPER_TILE = 2048

# ##>: Module-level generator shared by every caller that does not bring its own.
_GENERATOR = default_rng(PCG64DXSM())


def shared_generator() -> Generator:
    """Return the module-level random generator."""
    return _GENERATOR


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a line and compute the gained score.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, nearest-to-edge cell first.

    Returns
    -------
    score : int
        The sum of every merged tile value.
    merged_line : ndarray
        The compacted line after merging, without padding.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging is a single pass from the start of the line; a tile produced by a merge never
      merges again in the same pass, so ``(2, 2, 2, 2)`` gives ``(4, 4)`` and ``(2, 2, 2)`` gives ``(4, 2)``.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    # ##: Walk the compacted line and merge equal neighbours.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the board to the left, merging every row.

    Parameters
    ----------
    board : ndarray
        The game board as a 2D array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board with merged rows padded by trailing zeros.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(state: ndarray, direction: Direction | str) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    The board is rotated so that ``direction`` becomes a left move, slid, then rotated back. Lines are thus
    always read nearest-to-edge first and written back in their original orientation.

    Parameters
    ----------
    state : ndarray
        The current board. Not modified.
    direction : Direction | str
        The move to apply.

    Returns
    -------
    new_state : ndarray
        The board after the move.
    score : int
        The score gained by the move.
    """
    rotation = parse_direction(direction).rotation
    score, updated_board = slide_and_merge(rot90(state, k=rotation))
    return rot90(updated_board, k=-rotation), score


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` coordinates of every empty cell, in row-major order."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(state == 0)]


def fill_cells(
    state: ndarray,
    number_tile: int,
    rng: Generator | None = None,
    values: Sequence[int] = SPAWN_VALUES,
    probs: Sequence[float] = SPAWN_PROBS,
) -> ndarray:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    state : ndarray
        The current board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator, optional
        Random generator to draw from; defaults to the module-level generator.
    values : Sequence[int], optional
        Candidate tile values.
    probs : Sequence[float], optional
        Probability of each candidate value.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - Cells are chosen uniformly among the empty ones, without replacement.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - If there are fewer empty cells than requested, every empty cell is filled.
    - A full board is returned unchanged.
    """
    rng = rng if rng is not None else _GENERATOR

    available_cells = argwhere(state == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile <= 0:
        return state

    # ##: Randomly choose cell positions, then their values.
    chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
    tiles = rng.choice(values, size=number_tile, p=probs)

    state[tuple(available_cells[chosen_indices].T)] = tiles
    return state


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    state : ndarray
        The current board.

    Returns
    -------
    bool
        True when there are no empty cells AND no horizontally or vertically adjacent cells hold the same value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )


def max_tile(state: ndarray) -> int:
    """Return the largest tile on the board, 0 for an empty board."""
    return int(state.max(initial=0))


def is_super_tile(value: int, threshold: int = SUPER_TILE) -> bool:
    """Tell whether a tile is displayed with the shared style for values above ``threshold``."""
    return value > threshold
