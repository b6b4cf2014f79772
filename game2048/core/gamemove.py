"""
Move directions and legality checks for the 2048 engine.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    Direction of a move.

    The value is the number of counter-clockwise quarter turns that bring the direction onto LEFT.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def coerce(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction name or value into a member.

        Parameters
        ----------
        value : Direction | int | str
            A member, its integer value, or its case-insensitive name.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(value, bool):
            raise ValueError(f'Unknown direction: {value!r}')
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f'Unknown direction: {value!r}') from None
        return cls(value)


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    # ##>: Horizontal adjacency is shared by left/right, vertical by up/down.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile can slide when an empty cell sits on its destination side.
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
    Directions whose move changes the board.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Directions whose move leaves the board unchanged.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]
