# -*- coding: utf-8 -*-
"""Per-cell highlight tags for the selected cell."""
from typing import List, Optional

from sudoku_engine.common.config import HighlightSettings
from sudoku_engine.common.grid import Grid, get_box_size

HIGHLIGHTED = "highlighted"
HIGHLIGHTED_BOX = "highlighted-box"
HIGHLIGHTED_SAME_NUMBER = "highlighted-same-number"


def get_highlighted_cells(
    row: Optional[int],
    col: Optional[int],
    grid: Grid,
    size: int,
    highlight_settings: HighlightSettings,
) -> List[List[str]]:
    """
    Compute the highlight tags of every cell for the selection at (`row`, `col`).

    Tags are space separated. The selected cell itself is never tagged, and a
    cell already highlighted through its row or column is not tagged again as
    part of the box.

    Args:
        row (int): Selected row, or None when nothing is selected.
        col (int): Selected column, or None when nothing is selected.
        grid (Grid): Current puzzle grid.
        size (int): Grid size, 4 or 9.
        highlight_settings (HighlightSettings): Which highlights are enabled.

    Returns:
        List[List[str]]: a `size` x `size` grid of tag strings, "" for untagged cells.
    """
    tags: List[List[List[str]]] = [[[] for _ in range(size)] for _ in range(size)]

    if row is None or col is None:
        return [["" for _ in range(size)] for _ in range(size)]

    if highlight_settings.highlight_row_column:
        for c in range(size):
            if c != col:
                tags[row][c].append(HIGHLIGHTED)
        for r in range(size):
            if r != row:
                tags[r][col].append(HIGHLIGHTED)

    if highlight_settings.highlight_box:
        box = get_box_size(size)
        br = (row // box) * box
        bc = (col // box) * box
        for r in range(br, br + box):
            for c in range(bc, bc + box):
                if (r != row or c != col) and HIGHLIGHTED not in tags[r][c]:
                    tags[r][c].append(HIGHLIGHTED_BOX)

    value = grid[row][col].value
    if highlight_settings.highlight_same_numbers and value is not None:
        for r in range(size):
            for c in range(size):
                if (r != row or c != col) and grid[r][c].value == value:
                    tags[r][c].append(HIGHLIGHTED_SAME_NUMBER)

    return [[" ".join(cell_tags) for cell_tags in tag_row] for tag_row in tags]
