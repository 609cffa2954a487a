# -*- coding: utf-8 -*-
"""Grid model: cells, puzzle grids and solutions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sudoku_engine.common.constants import BOX_SIZES, EMPTY


@dataclass
class Cell:
    """A single cell of a puzzle grid.

    `notes` are the player's pencil marks. They are kept sorted and are always
    empty while the cell holds a value. The mutators below keep that invariant
    but do not look at `is_given`: refusing edits to given cells is up to the
    caller (see `GameSession`).
    """

    value: Optional[int] = None
    is_given: bool = False
    notes: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def set_value(self, value: int) -> None:
        self.value = value
        self.notes = []

    def toggle_note(self, value: int) -> None:
        if value in self.notes:
            self.notes.remove(value)
        else:
            self.notes.append(value)
            self.notes.sort()
        self.value = None

    def clear(self) -> None:
        self.value = None
        self.notes = []


Grid = List[List[Cell]]
"""A square puzzle grid of cells, 4x4 or 9x9."""

Solution = List[List[int]]
"""A fully filled, valid grid of plain integers."""


def get_box_size(size: int) -> int:
    """Side length of a box: 2 for 4x4 grids, 3 for 9x9 grids."""
    if size not in BOX_SIZES:
        raise ValueError(f"Unsupported grid size: {size}, must be one of {sorted(BOX_SIZES)}")
    return BOX_SIZES[size]


def create_empty_grid(size: int) -> Grid:
    """Create a `size` x `size` grid of empty, editable cells."""
    return [[Cell() for _ in range(size)] for _ in range(size)]


def grid_from_values(values: Sequence[Sequence[int]]) -> Grid:
    """Build a grid from plain ints, 0 (or None) meaning empty.

    Filled cells become given cells, the way a freshly carved puzzle looks.
    """
    grid = []
    for row in values:
        cells = []
        for v in row:
            if v is None or v == EMPTY:
                cells.append(Cell())
            else:
                cells.append(Cell(value=int(v), is_given=True))
        grid.append(cells)
    return grid


def grid_to_values(grid: Grid) -> List[List[int]]:
    """Flatten a grid into plain ints, 0 for empty cells."""
    return [[EMPTY if cell.value is None else cell.value for cell in row] for row in grid]
