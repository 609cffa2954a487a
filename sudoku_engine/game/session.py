# -*- coding: utf-8 -*-
"""Game session: the mutable state of the puzzle being played."""
from __future__ import annotations

import time
from typing import Callable, List, Optional

from sudoku_engine.common.config import GameSettings
from sudoku_engine.common.constants import GameStatus
from sudoku_engine.common.generator import SudokuGenerator
from sudoku_engine.common.grid import Cell, Grid, Solution
from sudoku_engine.common.highlight import get_highlighted_cells
from sudoku_engine.common.judge import SudokuJudge
from sudoku_engine.game.render import format_time
from sudoku_engine.hints import Hint, find_hint
from sudoku_engine.utils.log import get_logger

DIRECTIONS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class GameSession:
    """
    One player's game: the puzzle, its solution, the selection and the timer.

    The engine functions are stateless; the session owns everything that
    changes while playing and calls them one event at a time. Given cells are
    protected here: edits aimed at them move the selection to the next cell
    instead of reaching the grid.

    Attributes:
        grid: The puzzle being played.
        solution: The solution `grid` was carved from.
        status: PLAYING, SOLVED (terminal) or INCORRECT (filled with mistakes).
        pending_hint: The last hint shown, applied by `apply_hint()`.
        generator: Seeded puzzle generator, also the random source for hints.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = (settings or GameSettings()).check_and_update()
        self.clock = clock
        self.generator = SudokuGenerator(self.settings.grid_size, self.settings.seed)
        self.logger = get_logger(__name__)

        self.grid: Grid = []
        self.solution: Solution = []
        self.selected_row: Optional[int] = None
        self.selected_col: Optional[int] = None
        self.status = GameStatus.PLAYING
        self.is_paused = False
        self.show_seconds = False
        self.pending_hint: Optional[Hint] = None

        self._start_time = 0.0
        self._paused_at: Optional[float] = None
        self._final_elapsed: Optional[int] = None

        self.new_game()

    @property
    def size(self) -> int:
        return self.settings.grid_size

    @property
    def is_complete(self) -> bool:
        return self.status == GameStatus.SOLVED

    @property
    def selected_cell(self) -> Optional[Cell]:
        if self.selected_row is None or self.selected_col is None:
            return None
        return self.grid[self.selected_row][self.selected_col]

    # ------------------------------------------------------------------ #
    # game lifecycle
    # ------------------------------------------------------------------ #

    def new_game(self, settings: Optional[GameSettings] = None) -> None:
        """Start a new puzzle, optionally with new settings."""
        if settings is not None:
            self.settings = settings.check_and_update()
            self.generator = SudokuGenerator(self.settings.grid_size, self.settings.seed)
        game = self.generator.generate(self.settings.difficulty)
        self.grid = game.grid
        self.solution = game.solution

        self.selected_row = None
        self.selected_col = None
        self.status = GameStatus.PLAYING
        self.is_paused = False
        self.pending_hint = None
        self._start_time = self.clock()
        self._paused_at = None
        self._final_elapsed = None
        self.logger.info(
            f"New {self.settings.difficulty.value} {self.size}x{self.size} game started"
        )

    # ------------------------------------------------------------------ #
    # selection
    # ------------------------------------------------------------------ #

    def select_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Cell ({row}, {col}) is outside the {self.size}x{self.size} grid")
        self.selected_row = row
        self.selected_col = col

    def move_selection(self, direction: str) -> None:
        """Move the selection one cell, stopping at the grid edges."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        if self.selected_cell is None:
            self.select_cell(0, 0)
            return
        dr, dc = DIRECTIONS[direction]
        row = min(max(self.selected_row + dr, 0), self.size - 1)
        col = min(max(self.selected_col + dc, 0), self.size - 1)
        self.select_cell(row, col)

    def _skip_given_cell(self) -> None:
        # move right, wrapping to the next row and back to the top
        row, col = self.selected_row, self.selected_col + 1
        if col >= self.size:
            col = 0
            row = (row + 1) % self.size
        self.select_cell(row, col)

    def _editable_cell(self) -> Optional[Cell]:
        cell = self.selected_cell
        if cell is None or self.is_complete:
            return None
        if cell.is_given:
            self._skip_given_cell()
            return None
        return cell

    # ------------------------------------------------------------------ #
    # edits
    # ------------------------------------------------------------------ #

    def _check_number(self, value: int) -> None:
        if not 1 <= value <= self.size:
            raise ValueError(f"Value must be in 1..{self.size}, got {value}")

    def enter_number(self, value: int) -> GameStatus:
        """Write `value` into the selected cell and judge the grid."""
        self._check_number(value)
        cell = self._editable_cell()
        if cell is not None:
            cell.set_value(value)
            self._update_status()
        return self.status

    def toggle_note(self, value: int) -> None:
        """Toggle a pencil mark in the selected cell, clearing its value."""
        self._check_number(value)
        cell = self._editable_cell()
        if cell is not None:
            cell.toggle_note(value)
            if self.status == GameStatus.INCORRECT:
                self.status = GameStatus.PLAYING

    def erase_cell(self) -> None:
        """Clear the value and notes of the selected cell."""
        cell = self._editable_cell()
        if cell is not None:
            cell.clear()
            if self.status == GameStatus.INCORRECT:
                self.status = GameStatus.PLAYING

    def _update_status(self) -> None:
        self.status = SudokuJudge.check(self.grid, self.size)
        if self.status == GameStatus.SOLVED:
            self._final_elapsed = self.elapsed_seconds
            self.show_seconds = True
            self.logger.info(self.completion_message())
        elif self.status == GameStatus.INCORRECT:
            self.logger.debug("Grid is filled but not a valid solution")

    # ------------------------------------------------------------------ #
    # hints
    # ------------------------------------------------------------------ #

    def request_hint(self) -> Optional[Hint]:
        self.pending_hint = find_hint(
            self.grid,
            self.solution,
            self.size,
            rng=self.generator.rng,
            strategies=self.settings.hint_strategies,
        )
        return self.pending_hint

    def apply_hint(self, hint: Optional[Hint] = None) -> GameStatus:
        """Write a hint (by default the last one requested) into the grid."""
        hint = hint or self.pending_hint
        if hint is None or self.is_complete:
            return self.status
        self.grid[hint.row][hint.col].set_value(hint.value)
        self.select_cell(hint.row, hint.col)
        self.pending_hint = None
        self._update_status()
        return self.status

    def solve(self) -> GameStatus:
        """Fill every editable cell with its solution value."""
        if self.is_complete:
            return self.status
        for r in range(self.size):
            for c in range(self.size):
                cell = self.grid[r][c]
                if not cell.is_given and cell.value != self.solution[r][c]:
                    cell.set_value(self.solution[r][c])
        self._update_status()
        return self.status

    # ------------------------------------------------------------------ #
    # timer
    # ------------------------------------------------------------------ #

    def pause(self) -> None:
        if not self.is_paused and not self.is_complete:
            self.is_paused = True
            self._paused_at = self.clock()

    def resume(self) -> None:
        if self.is_paused:
            self._start_time += self.clock() - self._paused_at
            self.is_paused = False
            self._paused_at = None

    @property
    def elapsed_seconds(self) -> int:
        """Seconds played, frozen while paused and once solved."""
        if self._final_elapsed is not None:
            return self._final_elapsed
        now = self._paused_at if self.is_paused else self.clock()
        return int(now - self._start_time)

    def toggle_seconds_display(self) -> None:
        self.show_seconds = not self.show_seconds

    @property
    def timer_text(self) -> str:
        return format_time(self.elapsed_seconds, self.show_seconds)

    # ------------------------------------------------------------------ #
    # display helpers
    # ------------------------------------------------------------------ #

    def highlights(self) -> List[List[str]]:
        return get_highlighted_cells(
            self.selected_row,
            self.selected_col,
            self.grid,
            self.size,
            self.settings.highlight,
        )

    def completion_message(self) -> str:
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return (
            f"You've completed the {self.settings.difficulty.value} "
            f"{self.size}x{self.size} puzzle in {minutes}m {seconds}s!"
        )
