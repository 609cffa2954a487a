# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# env var names

LOG_LEVEL_ENV_VAR = "SUDOKU_LOG_LEVEL"  # global log level
CONFIG_PATH_ENV_VAR = "SUDOKU_CONFIG_PATH"  # default config file for the cli


# constants

GRID_SIZES = (4, 9)

BOX_SIZES = {
    4: 2,
    9: 3,
}

EMPTY = 0  # empty cell in plain int grids


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        if isinstance(value, cls):
            return value
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Puzzle difficulty, i.e. how many cells are carved out of the solution."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameStatus(CaseInsensitiveEnum):
    """Status of the puzzle currently being played."""

    PLAYING = "playing"  # at least one empty cell
    SOLVED = "solved"  # filled and valid, terminal
    INCORRECT = "incorrect"  # filled but invalid, the player keeps editing


# number of cells removed from a full solution, by grid size
REMOVAL_COUNTS = {
    4: {
        Difficulty.EASY: 5,
        Difficulty.MEDIUM: 8,
        Difficulty.HARD: 11,
    },
    9: {
        Difficulty.EASY: 35,
        Difficulty.MEDIUM: 45,
        Difficulty.HARD: 55,
    },
}
