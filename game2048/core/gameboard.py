"""
Board transformations for the 2048 engine: line compaction, directional moves, tile spawning
and terminal-state detection.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, zeros_like
from numpy.random import Generator, default_rng

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compact one line toward index 0 and compute the score of the merges.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, already in traversal order.

    Returns
    -------
    score : int
        Sum of the values produced by merges.
    merged_line : ndarray
        The non-empty values after sliding and merging, without padding.

    Notes
    -----
    - Empty cells (zeros) are removed before merging.
    - Merging scans from index 0 towards the end.
    - A merged cell never merges again in the same call: ``[2, 2, 2, 2]`` gives ``[4, 4]``.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

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

    # ##: Trailing tile left over by the scan.
    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the board to the left and merge adjacent equal tiles.

    Parameters
    ----------
    board : ndarray
        The game board as a 2D array.

    Returns
    -------
    score : int
        Total score of all merges.
    updated_board : ndarray
        A new board, each row padded with empty cells on the right.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        row_score, merged_row = merge_line(row)
        score += row_score
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(state: ndarray, action: int) -> tuple[ndarray, int]:
    """
    Apply a move without spawning a tile.

    Parameters
    ----------
    state : ndarray
        The current board. Not modified.
    action : int
        Direction of the move (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    new_state : ndarray
        The board after sliding and merging.
    reward : int
        Score gained by the move.

    Notes
    -----
    The board is rotated counter-clockwise ``action`` times so the move becomes a left move,
    compacted, then rotated back.
    """
    rotated_board = rot90(state, k=action)
    reward, updated_board = slide_and_merge(rotated_board)
    return rot90(updated_board, k=-action).copy(), reward


def fill_cells(
    state: ndarray,
    number_tile: int,
    rng: Generator | None = None,
    tile_probs: dict[int, float] | None = None,
) -> list[tuple[int, int]]:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    state : ndarray
        The game board. **Modified in-place.**
    number_tile : int
        Number of tiles requested.
    rng : Generator, optional
        Random source. A fresh unseeded generator is used when omitted.
    tile_probs : dict[int, float], optional
        Tile values and their probabilities (default is ``TILE_SPAWN_PROBS``).

    Returns
    -------
    list[tuple[int, int]]
        Coordinates of the cells that received a tile, in placement order.

    Notes
    -----
    - Cells are drawn uniformly among empty cells, without replacement.
    - If fewer cells are empty than requested, every empty cell is filled.
    """
    rng = rng if rng is not None else default_rng()
    tile_probs = tile_probs if tile_probs is not None else TILE_SPAWN_PROBS

    available_cells = argwhere(state == 0)
    count = min(number_tile, len(available_cells))
    if count <= 0:
        return []

    # ##: Pick distinct cells, then a value for each.
    chosen_indices = rng.choice(len(available_cells), size=count, replace=False)
    values = rng.choice(list(tile_probs), size=count, p=list(tile_probs.values()))

    chosen_cells = available_cells[chosen_indices]
    state[tuple(chosen_cells.T)] = values
    return [(int(row), int(col)) for row, col in chosen_cells]


def is_done(state: ndarray) -> bool:
    """
    Check whether no move can change the board anymore.

    Parameters
    ----------
    state : ndarray
        The game board.

    Returns
    -------
    bool
        True if the board is full and no two adjacent cells hold the same value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
