"""Plain-text rendering of grids, hints and timers."""
from typing import List, Optional, Tuple

from sudoku_engine.common.grid import Grid, get_box_size
from sudoku_engine.hints import Hint


def format_time(seconds: int, show_seconds: bool = False) -> str:
    """`MM:SS` when `show_seconds`, else whole minutes as `MMm`."""
    minutes, rest = divmod(int(seconds), 60)
    if show_seconds:
        return f"{minutes:02d}:{rest:02d}"
    return f"{minutes:02d}m"


def render_grid(
    grid: Grid,
    size: int,
    selected: Optional[Tuple[int, int]] = None,
    conflicts: Optional[List[Tuple[int, int]]] = None,
) -> str:
    """
    Render the grid as text.

    Given values are shown as is, player values with a trailing `'`, empty
    cells as `.`. The selected cell is bracketed and conflicting cells are
    marked with `!`. Boxes are separated by `|` and dashed lines.
    """
    box = get_box_size(size)
    conflicts = set(conflicts or [])
    lines = []
    for r, row in enumerate(grid):
        if r and r % box == 0:
            lines.append("+".join(["-" * (4 * box)] * (size // box)))
        parts = []
        for c, cell in enumerate(row):
            if c and c % box == 0:
                parts.append("|")
            text = "." if cell.value is None else str(cell.value)
            if cell.value is not None and not cell.is_given:
                text += "!" if (r, c) in conflicts else "'"
            if selected == (r, c):
                parts.append(f"[{text}]".ljust(3))
            else:
                parts.append(f" {text}".ljust(3))
        lines.append(" ".join(parts).rstrip())
    return "\n".join(lines)


def render_values(values: List[List[int]]) -> str:
    """Compact form of a plain int grid: rows joined by `/`, `.` for empty cells."""
    return "/".join("".join(str(v) if v else "." for v in row) for row in values)


def parse_values(text: str) -> List[List[int]]:
    """
    Parse the compact form written by `render_values`.

    Rows are separated by `/` or whitespace; `.` and `0` are empty cells.

    Raises:
        ValueError: the text does not describe a 4x4 or 9x9 grid.
    """
    rows = [row for row in text.replace("/", " ").split() if row]
    size = len(rows)
    get_box_size(size)
    values = []
    for row in rows:
        if len(row) != size:
            raise ValueError(f"Row {row!r} must have {size} cells")
        cells = []
        for ch in row:
            if ch in ".0":
                cells.append(0)
            elif ch.isdigit() and int(ch) <= size:
                cells.append(int(ch))
            else:
                raise ValueError(f"Invalid cell {ch!r} in row {row!r}")
        values.append(cells)
    return values


def render_hint(hint: Optional[Hint]) -> str:
    if hint is None:
        return "No hint available: the grid is already filled."
    return (
        f"Try placing {hint.value} in row {hint.row + 1}, column {hint.col + 1}.\n"
        f"{hint.reason}"
    )
