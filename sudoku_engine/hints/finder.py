# -*- coding: utf-8 -*-
"""Hint dispatcher."""
import random
from typing import Optional, Sequence

from sudoku_engine.common.config import DEFAULT_HINT_STRATEGIES
from sudoku_engine.common.grid import Grid, Solution
from sudoku_engine.hints.hint_strategy import Hint
from sudoku_engine.hints.registry import HINT_STRATEGIES
from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)


def find_hint(
    grid: Grid,
    solution: Solution,
    size: int,
    rng: Optional[random.Random] = None,
    strategies: Optional[Sequence[str]] = None,
) -> Optional[Hint]:
    """
    Propose one move for the player.

    Strategies are tried in order and the first hint found is returned. By
    default: naked single, naked pair (rows only), then the solution value of
    a random empty cell.

    Args:
        grid (Grid): Current puzzle grid, not modified.
        solution (Solution): The solution the puzzle was carved from.
        size (int): Grid size, 4 or 9.
        rng (random.Random): Optional random source for the fallback strategy.
        strategies (Sequence[str]): Registered strategy names, in priority order.

    Returns:
        Optional[Hint]: a hint, or None when the grid has no empty cell left.
    """
    for name in strategies or DEFAULT_HINT_STRATEGIES:
        strategy = HINT_STRATEGIES.get(name)(rng=rng)
        hint = strategy.find(grid, solution, size)
        if hint is not None:
            logger.debug(f"Hint from {name}: ({hint.row}, {hint.col}) = {hint.value}")
            return hint
    return None
