"""
Move directions for the 2048 grid and helpers determining which of them are legal on a board.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four moves of the game.

    The value is the number of counter-clockwise quarter turns bringing the target edge to the left.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction, its value or its name into a ``Direction``.

        Parameters
        ----------
        value : Direction | int | str
            Value to convert. Names are case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f'{value!r} is not a valid Direction') from None
        if isinstance(value, bool):
            raise ValueError(f'{value!r} is not a valid Direction')
        return cls(value)


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    # ##>: Horizontal pairs decide left/right, vertical pairs decide up/down.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile slides when the cell on its target side is empty.
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


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]

