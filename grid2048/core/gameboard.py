"""
Core functionality for the 2048 grid: board validation, sliding and merging, tile spawning and game over detection.
"""

import logging
from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array_equal, asarray, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from grid2048.core.gamemove import Direction
from grid2048.core.spawn import CLASSIC, SpawnPolicy

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Module-level generator, used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())


class InvalidBoardError(ValueError):
    """Raised when a board does not satisfy the grid invariants."""


class MoveOutcome(NamedTuple):
    """
    Result of a move.

    Attributes
    ----------
    board : ndarray
        Board after the move.
    changed : bool
        Whether at least one tile slid or merged.
    score : int
        Sum of the values produced by merges during the move.
    """

    board: ndarray
    changed: bool
    score: int


def new_board(size: int) -> ndarray:
    """
    Create an empty board.

    Parameters
    ----------
    size : int
        Side of the square grid, at least 2.

    Returns
    -------
    ndarray
        A ``size`` x ``size`` board of zeros.
    """
    if size < 2:
        raise ValueError(f'Board size must be at least 2, got {size}')
    return zeros((size, size), dtype=int64)


def validate_board(board: ndarray) -> ndarray:
    """
    Check that a board is square and only holds empty cells or powers of two.

    Parameters
    ----------
    board : ndarray
        Board to check.

    Returns
    -------
    ndarray
        The board as an int64 array.

    Raises
    ------
    InvalidBoardError
        If the board is not a square 2D grid of side >= 2, or holds a value other than 0 or a power of two >= 2.
    """
    board = asarray(board)
    if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] < 2:
        raise InvalidBoardError(f'Expected a square board of side >= 2, got shape {board.shape}')
    if board.dtype.kind not in 'iu':
        raise InvalidBoardError(f'Expected an integer board, got dtype {board.dtype}')

    # ##>: Merges double values, narrow dtypes would overflow.
    board = board.astype(int64, copy=False)

    # ##>: Powers of two have a single bit set.
    tiles = board[board != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise InvalidBoardError(f'Board holds values that are not powers of two >= 2: {sorted(set(tiles.tolist()))}')
    return board


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Slide a line toward its first cell and merge equal neighbours.

    Parameters
    ----------
    line : ndarray
        A 1D array, index 0 being the edge the tiles move toward.

    Returns
    -------
    score : int
        Sum of the tiles produced by merges.
    merged_line : ndarray
        Line of the same length after sliding and merging, padded with zeros.

    Notes
    -----
    - Tiles keep their relative order.
    - A tile produced by a merge does not merge again in the same move: ``[2, 2, 4, 0]`` gives ``[4, 4, 0, 0]``.
    """
    result = zeros_like(line)
    score = 0

    # ##: Write position and whether the tile there already absorbed a merge.
    position = -1
    merged = False

    for value in line:
        if value == 0:
            continue
        if position >= 0 and not merged and result[position] == value:
            result[position] = value * 2
            score += int(value) * 2
            merged = True
        else:
            position += 1
            result[position] = value
            merged = False

    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, result[i] = merge_line(row)
        score += score_row

    return score, result


def apply_move(board: ndarray, direction: Direction | int) -> MoveOutcome:
    """
    Move every tile toward one edge, without spawning.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    direction : Direction | int
        Direction of the move.

    Returns
    -------
    MoveOutcome
        The new board, whether it differs from the input, and the score of the move.
    """
    board = validate_board(board)
    direction = Direction.parse(direction)

    # ##: Bring the target edge to the left, slide, then rotate back.
    score, updated = slide_and_merge(rot90(board, k=direction))
    updated = rot90(updated, k=-direction).copy()

    return MoveOutcome(board=updated, changed=not array_equal(updated, board), score=score)


def spawn_tile(board: ndarray, policy: SpawnPolicy = CLASSIC, rng: Generator | None = None) -> ndarray:
    """
    Place new tiles in random empty cells.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    policy : SpawnPolicy, optional
        Distribution of the new tiles (default is 90% of 2, 10% of 4).
    rng : Generator, optional
        Random generator, the module-level one when omitted.

    Returns
    -------
    ndarray
        A new board with the spawned tiles.

    Notes
    -----
    - Empty cells are chosen uniformly, without replacement.
    - With fewer empty cells than the policy places, available cells are filled in policy order.
    - A full board is returned unchanged.
    """
    board = validate_board(board).copy()
    rng = rng if rng is not None else _GENERATOR

    available_cells = argwhere(board == 0)
    if len(available_cells) == 0:
        _logger.debug('No empty cell left, spawn skipped.')
        return board

    values = policy.draw(rng)[: len(available_cells)]
    chosen_indices = rng.choice(len(available_cells), size=len(values), replace=False)
    board[tuple(available_cells[chosen_indices].T)] = values
    return board


def next_state(
    board: ndarray, direction: Direction | int, policy: SpawnPolicy = CLASSIC, rng: Generator | None = None
) -> MoveOutcome:
    """
    Play one turn: move, then spawn if the move changed the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    direction : Direction | int
        Direction of the move.
    policy : SpawnPolicy, optional
        Distribution of the new tiles.
    rng : Generator, optional
        Random generator used for the spawn.

    Returns
    -------
    MoveOutcome
        The board after the turn, whether the move changed it, and the score of the move.
    """
    outcome = apply_move(board, direction)
    if not outcome.changed:
        return outcome
    return outcome._replace(board=spawn_tile(outcome.board, policy=policy, rng=rng))


def is_game_over(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if every cell is filled and no two orthogonal neighbours are equal.
    """
    board = validate_board(board)
    if not np_all(board != 0):
        return False
    if np_any(board[:, :-1] == board[:, 1:]):
        return False
    return not np_any(board[:-1] == board[1:])
