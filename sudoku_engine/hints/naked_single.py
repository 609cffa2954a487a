from typing import Optional

from sudoku_engine.common.grid import Grid, Solution
from sudoku_engine.hints.hint_strategy import Hint, HintStrategy


class NakedSingle(HintStrategy):
    """The first empty cell, row-major, with exactly one legal value."""

    name = "naked_single"

    def find(self, grid: Grid, solution: Solution, size: int) -> Optional[Hint]:
        for row, col in self.empty_cells(grid, size):
            candidates = self.candidates(grid, row, col, size)
            if len(candidates) == 1:
                value = candidates[0]
                return Hint(
                    row=row,
                    col=col,
                    value=value,
                    reason=(
                        f"Cell ({row + 1}, {col + 1}) can only contain the value {value} "
                        "because all other values would conflict with existing numbers "
                        "in the row, column, or box."
                    ),
                    technique=self.name,
                )
        return None
