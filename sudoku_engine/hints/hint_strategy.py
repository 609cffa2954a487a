# -*- coding: utf-8 -*-
"""Base class of hint strategies."""
from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from sudoku_engine.common.constraints import get_candidates
from sudoku_engine.common.grid import Grid, Solution


@dataclass
class Hint:
    """A suggested move: place `value` at (`row`, `col`), both 0-based."""

    row: int
    col: int
    value: int
    reason: str
    technique: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class HintStrategy:
    """
    A deduction technique proposing at most one move.

    Strategies are registered in `HINT_STRATEGIES` and tried in order by
    `find_hint`; the first one returning a hint wins. Subclasses implement
    `find`, which must not modify `grid` or `solution`.
    """

    name: str = ""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def find(self, grid: Grid, solution: Solution, size: int) -> Optional[Hint]:
        """
        Look for a move.

        Args:
            grid (Grid): Current puzzle grid.
            solution (Solution): The solution the puzzle was carved from.
            size (int): Grid size, 4 or 9.

        Returns:
            Optional[Hint]: a hint, or None if the technique does not apply.
        """
        raise NotImplementedError

    @staticmethod
    def empty_cells(grid: Grid, size: int) -> List[Tuple[int, int]]:
        """Coordinates of empty cells, row-major."""
        return [(r, c) for r in range(size) for c in range(size) if grid[r][c].value is None]

    @staticmethod
    def candidates(grid: Grid, row: int, col: int, size: int) -> List[int]:
        return get_candidates(grid, row, col, size)
