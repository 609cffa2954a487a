# -*- coding: utf-8 -*-
"""Configs for games and the command line front end."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from omegaconf import OmegaConf

from sudoku_engine.common.constants import GRID_SIZES, Difficulty
from sudoku_engine.utils.log import get_logger, set_log_level

logger = get_logger(__name__)

DEFAULT_HINT_STRATEGIES = ["naked_single", "naked_pair", "solution_fallback"]


@dataclass
class HighlightSettings:
    """Which cells to highlight around the selected cell."""

    highlight_row_column: bool = True
    highlight_box: bool = True
    highlight_same_numbers: bool = True


@dataclass
class GameSettings:
    grid_size: int = 9
    difficulty: Difficulty = Difficulty.EASY
    seed: Optional[int] = None  # None for a fresh random source per session
    highlight: HighlightSettings = field(default_factory=HighlightSettings)
    # hint strategies, tried in order until one returns a hint
    hint_strategies: List[str] = field(default_factory=lambda: list(DEFAULT_HINT_STRATEGIES))

    def check_and_update(self) -> GameSettings:
        if self.grid_size not in GRID_SIZES:
            raise ValueError(f"`grid_size` must be one of {list(GRID_SIZES)}, got {self.grid_size}")
        self.difficulty = Difficulty(self.difficulty)
        if not self.hint_strategies:
            logger.warning("`hint_strategies` is empty, using the default strategies.")
            self.hint_strategies = list(DEFAULT_HINT_STRATEGIES)

        from sudoku_engine.hints import HINT_STRATEGIES

        for name in self.hint_strategies:
            # raises ValueError for unknown names
            HINT_STRATEGIES.get(name)
        return self


@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class SudokuConfig:
    """Global configuration."""

    game: GameSettings = field(default_factory=GameSettings)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)

    def check_and_update(self) -> SudokuConfig:
        """Check and update the config."""
        try:
            set_log_level(self.log.level)
        except ValueError as e:
            raise ValueError(f"Invalid log level: {self.log.level}") from e
        self.game.check_and_update()
        return self


def load_config(config_path: str) -> SudokuConfig:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(SudokuConfig)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        config = OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
    return config.check_and_update()
