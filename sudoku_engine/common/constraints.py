# -*- coding: utf-8 -*-
"""Row / column / box constraint checks on puzzle grids."""
from typing import List

from sudoku_engine.common.grid import Grid, get_box_size


def is_valid_value(grid: Grid, row: int, col: int, value: int, size: int) -> bool:
    """
    Check whether `value` may be placed at (`row`, `col`).

    The cell itself is ignored, so a filled cell can be checked against its
    own value. The grid is never modified.

    Args:
        grid (Grid): Current puzzle grid.
        row (int): Row index (0-based).
        col (int): Column index (0-based).
        value (int): Candidate value in 1..size.
        size (int): Grid size, 4 or 9.

    Returns:
        bool: False if `value` already appears elsewhere in the row, column or box.
    """
    for c in range(size):
        if c != col and grid[row][c].value == value:
            return False

    for r in range(size):
        if r != row and grid[r][col].value == value:
            return False

    box = get_box_size(size)
    br = (row // box) * box
    bc = (col // box) * box
    for r in range(br, br + box):
        for c in range(bc, bc + box):
            if (r != row or c != col) and grid[r][c].value == value:
                return False

    return True


def get_candidates(grid: Grid, row: int, col: int, size: int) -> List[int]:
    """All values in 1..size that pass `is_valid_value`, ascending."""
    return [v for v in range(1, size + 1) if is_valid_value(grid, row, col, v, size)]
