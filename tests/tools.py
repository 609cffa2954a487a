"""Shared test data and helpers."""
from typing import List

from sudoku_engine.common.grid import Grid, grid_from_values

SOLUTION_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]

SOLUTION_9X9 = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def copy_values(values: List[List[int]]) -> List[List[int]]:
    return [row[:] for row in values]


def make_grid(values: List[List[int]], empty=()) -> Grid:
    """Grid of given cells from `values`, with the `empty` coordinates cleared."""
    values = copy_values(values)
    for r, c in empty:
        values[r][c] = 0
    return grid_from_values(values)
