from typing import Optional

from sudoku_engine.common.grid import Grid, Solution
from sudoku_engine.hints.hint_strategy import Hint, HintStrategy


class NakedPair(HintStrategy):
    """
    Naked pairs, searched in rows only.

    Two empty cells of a row whose candidates are the same two values must
    hold those two values between them, so neither value can go anywhere else
    in the row. When another empty cell of the row (with more than two
    candidates) still lists one of them, that cell is suggested with its value
    from the solution.
    """

    name = "naked_pair"

    def find(self, grid: Grid, solution: Solution, size: int) -> Optional[Hint]:
        for row in range(size):
            empty = [
                (col, self.candidates(grid, row, col, size))
                for col in range(size)
                if grid[row][col].value is None
            ]
            pairs = [(col, cands) for col, cands in empty if len(cands) == 2]

            for i in range(len(pairs)):
                for j in range(i + 1, len(pairs)):
                    col_i, pair = pairs[i]
                    col_j, other = pairs[j]
                    if set(pair) != set(other):
                        continue

                    for col, cands in empty:
                        if len(cands) <= 2:
                            continue
                        shared = [v for v in cands if v in pair]
                        if not shared:
                            continue
                        eliminated = shared[0]
                        return Hint(
                            row=row,
                            col=col,
                            value=solution[row][col],
                            reason=(
                                f'Using the "naked pair" technique: cells ({row + 1}, {col_i + 1}) '
                                f"and ({row + 1}, {col_j + 1}) can only contain the values "
                                f"{' or '.join(str(v) for v in pair)}. This means {eliminated} "
                                f"cannot be in cell ({row + 1}, {col + 1})."
                            ),
                            technique=self.name,
                        )
        return None
