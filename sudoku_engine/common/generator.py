# -*- coding: utf-8 -*-
"""Solution generation and puzzle carving."""
import random
from typing import List, NamedTuple, Optional, Tuple, Union

from sudoku_engine.common.constants import EMPTY, REMOVAL_COUNTS, Difficulty
from sudoku_engine.common.grid import Cell, Grid, Solution, get_box_size
from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)


class SudokuGame(NamedTuple):
    """A freshly generated puzzle and the solution it was carved from."""

    grid: Grid
    solution: Solution


def get_removal_count(size: int, difficulty: Union[Difficulty, str]) -> int:
    """Number of cells carved out of a `size` x `size` solution at `difficulty`."""
    get_box_size(size)
    return REMOVAL_COUNTS[size][Difficulty(difficulty)]


def generate_solution(size: int, rng: Optional[random.Random] = None) -> Solution:
    """
    Generate a fully filled, valid grid using randomized backtracking.

    Cells are filled in row-major order. The values tried at each cell are
    shuffled first so the result is not biased towards the lexicographically
    first fill.

    Args:
        size (int): Grid size, 4 or 9.
        rng (random.Random): Optional random source, for reproducible grids.

    Returns:
        Solution: a `size` x `size` grid of ints.
    """
    rng = rng or random
    box = get_box_size(size)
    solution = [[EMPTY for _ in range(size)] for _ in range(size)]

    def fits(row: int, col: int, value: int) -> bool:
        # only cells before (row, col) in row-major order are filled
        if value in solution[row][:col]:
            return False
        for r in range(row):
            if solution[r][col] == value:
                return False
        br = (row // box) * box
        bc = (col // box) * box
        for r in range(br, row):
            for c in range(bc, bc + box):
                if solution[r][c] == value:
                    return False
        return True

    def solve(row: int, col: int) -> bool:
        if row == size:
            return True
        if col == size:
            return solve(row + 1, 0)

        values = list(range(1, size + 1))
        rng.shuffle(values)

        for v in values:
            if not fits(row, col, v):
                continue
            solution[row][col] = v
            if solve(row, col + 1):
                return True
            solution[row][col] = EMPTY

        return False

    solve(0, 0)
    logger.debug(f"Generated {size}x{size} solution")
    return solution


def create_puzzle(
    solution: Solution,
    difficulty: Union[Difficulty, str],
    size: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Carve a playable puzzle out of a solution.

    Every cell starts as a given cell holding its solution value. The cell
    coordinates are shuffled and the tail of the permutation is cleared, so
    exactly `get_removal_count(size, difficulty)` cells end up empty. No
    uniqueness check is made: the puzzle may admit other solutions.

    Args:
        solution (Solution): A full, valid solution.
        difficulty (Difficulty | str): Difficulty level.
        size (int): Grid size, 4 or 9.
        rng (random.Random): Optional random source.

    Returns:
        Grid: the puzzle.
    """
    rng = rng or random
    holes = get_removal_count(size, difficulty)

    grid = [
        [Cell(value=solution[r][c], is_given=True) for c in range(size)] for r in range(size)
    ]

    cells: List[Tuple[int, int]] = [(r, c) for r in range(size) for c in range(size)]
    rng.shuffle(cells)

    keep = size * size - holes
    for r, c in cells[keep:]:
        grid[r][c].value = None
        grid[r][c].is_given = False

    logger.debug(
        f"Carved {holes} cells out of {size}x{size} solution ({Difficulty(difficulty).value})"
    )
    return grid


def generate_sudoku(
    size: int, difficulty: Union[Difficulty, str], rng: Optional[random.Random] = None
) -> SudokuGame:
    """Generate a new puzzle together with its solution."""
    solution = generate_solution(size, rng=rng)
    grid = create_puzzle(solution, difficulty, size, rng=rng)
    return SudokuGame(grid=grid, solution=solution)


class SudokuGenerator:
    """
    Puzzle generator bound to a grid size and a random source.

    Convenient for callers that start many games with the same settings, e.g.
    a game session seeded once from its config.
    """

    def __init__(self, size: int = 9, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            size (int): Size of the Sudoku board, 4 or 9.
            seed (int): Optional seed for reproducible puzzles.
        """
        self.size = size
        self.block = get_box_size(size)
        self.rng = random.Random(seed)

    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.EASY) -> SudokuGame:
        """
        Generate a Sudoku puzzle and its solution.

        Args:
            difficulty (Difficulty | str): Difficulty level ("easy", "medium", "hard").

        Returns:
            SudokuGame: (grid, solution).
        """
        return generate_sudoku(self.size, difficulty, rng=self.rng)
