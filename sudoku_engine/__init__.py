# -*- coding: utf-8 -*-
"""Sudoku puzzle engine: generation, validation, completion checks and hints."""
from sudoku_engine.common.config import GameSettings, HighlightSettings
from sudoku_engine.common.constants import Difficulty, GameStatus
from sudoku_engine.common.constraints import get_candidates, is_valid_value
from sudoku_engine.common.generator import (
    SudokuGame,
    create_puzzle,
    generate_solution,
    generate_sudoku,
)
from sudoku_engine.common.grid import Cell, Grid, Solution, create_empty_grid
from sudoku_engine.common.highlight import get_highlighted_cells
from sudoku_engine.common.judge import is_grid_filled, is_sudoku_complete
from sudoku_engine.hints import Hint, find_hint

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Difficulty",
    "GameSettings",
    "GameStatus",
    "Grid",
    "HighlightSettings",
    "Hint",
    "Solution",
    "SudokuGame",
    "create_empty_grid",
    "create_puzzle",
    "find_hint",
    "generate_solution",
    "generate_sudoku",
    "get_candidates",
    "get_highlighted_cells",
    "is_grid_filled",
    "is_sudoku_complete",
    "is_valid_value",
]
