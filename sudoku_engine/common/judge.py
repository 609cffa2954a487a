from typing import List, Tuple

from sudoku_engine.common.constants import GameStatus
from sudoku_engine.common.constraints import is_valid_value
from sudoku_engine.common.grid import Grid, get_box_size


def is_grid_filled(grid: Grid) -> bool:
    """True if every cell holds a value, correct or not."""
    for row in grid:
        for cell in row:
            if cell.value is None:
                return False
    return True


def is_sudoku_complete(grid: Grid, size: int) -> bool:
    """True if the grid is filled and every row, column and box holds 1..size once."""
    if not is_grid_filled(grid):
        return False

    # Check rows
    for row in grid:
        if len({cell.value for cell in row}) != size:
            return False

    # Check columns
    for c in range(size):
        if len({grid[r][c].value for r in range(size)}) != size:
            return False

    # Check boxes
    block = get_box_size(size)
    for br in range(0, size, block):
        for bc in range(0, size, block):
            values = set()
            for r in range(br, br + block):
                for c in range(bc, bc + block):
                    values.add(grid[r][c].value)
            if len(values) != size:
                return False

    return True


def find_conflicts(grid: Grid, size: int) -> List[Tuple[int, int]]:
    """Coordinates of filled cells clashing with another cell in their row, column or box."""
    return [
        (r, c)
        for r in range(size)
        for c in range(size)
        if grid[r][c].value is not None
        and not is_valid_value(grid, r, c, grid[r][c].value, size)
    ]


class SudokuJudge:
    """
    Judge the state of a puzzle being played.

    - Supports both 9x9 and 4x4 grids
    - A grid with empty cells is still in play
    - A filled grid is either solved or incorrect
    """

    @staticmethod
    def check(grid: Grid, size: int) -> GameStatus:
        if not is_grid_filled(grid):
            return GameStatus.PLAYING
        if is_sudoku_complete(grid, size):
            return GameStatus.SOLVED
        return GameStatus.INCORRECT
