# -*- coding: utf-8 -*-
"""Hint module"""
from sudoku_engine.hints.finder import find_hint
from sudoku_engine.hints.hint_strategy import Hint, HintStrategy
from sudoku_engine.hints.registry import HINT_STRATEGIES

__all__ = [
    "Hint",
    "HintStrategy",
    "HINT_STRATEGIES",
    "find_hint",
]
