from sudoku_engine.game.render import format_time, render_grid, render_hint
from sudoku_engine.game.session import GameSession

__all__ = [
    "GameSession",
    "format_time",
    "render_grid",
    "render_hint",
]
