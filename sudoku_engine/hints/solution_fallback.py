from typing import Optional

from sudoku_engine.common.grid import Grid, Solution
from sudoku_engine.hints.hint_strategy import Hint, HintStrategy


class SolutionFallback(HintStrategy):
    """Reveal the solution value of a random empty cell."""

    name = "solution_fallback"

    def find(self, grid: Grid, solution: Solution, size: int) -> Optional[Hint]:
        empty = self.empty_cells(grid, size)
        if not empty:
            return None
        row, col = self.rng.choice(empty)
        value = solution[row][col]
        return Hint(
            row=row,
            col=col,
            value=value,
            reason=(
                f"In position ({row + 1}, {col + 1}), the number {value} is the correct "
                "value according to the rules of Sudoku."
            ),
            technique=self.name,
        )
