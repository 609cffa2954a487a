# -*- coding: utf-8 -*-
"""Test cases for config loading."""
import os
import tempfile
import unittest

from sudoku_engine.common.config import (
    DEFAULT_HINT_STRATEGIES,
    GameSettings,
    SudokuConfig,
    load_config,
)
from sudoku_engine.common.constants import Difficulty


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, "config.yaml")

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, text: str) -> str:
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(text)
        return self.config_path

    def test_defaults(self):
        config = SudokuConfig().check_and_update()

        self.assertEqual(config.game.grid_size, 9)
        self.assertEqual(config.game.difficulty, Difficulty.EASY)
        self.assertTrue(config.game.highlight.highlight_row_column)
        self.assertTrue(config.game.highlight.highlight_box)
        self.assertTrue(config.game.highlight.highlight_same_numbers)
        self.assertEqual(config.game.hint_strategies, DEFAULT_HINT_STRATEGIES)

    def test_load_config(self):
        path = self._write(
            "game:\n"
            "  grid_size: 4\n"
            "  difficulty: hard\n"
            "  seed: 42\n"
            "  highlight:\n"
            "    highlight_box: false\n"
            "log:\n"
            "  level: debug\n"
        )
        config = load_config(path)

        self.assertEqual(config.game.grid_size, 4)
        self.assertEqual(config.game.difficulty, Difficulty.HARD)
        self.assertEqual(config.game.seed, 42)
        self.assertFalse(config.game.highlight.highlight_box)
        self.assertTrue(config.game.highlight.highlight_row_column)

    def test_save_and_load(self):
        config = SudokuConfig()
        config.game.grid_size = 4
        config.game.difficulty = Difficulty.MEDIUM
        config.save(self.config_path)

        loaded = load_config(self.config_path)
        self.assertEqual(loaded.game.grid_size, 4)
        self.assertEqual(loaded.game.difficulty, Difficulty.MEDIUM)

    def test_invalid_grid_size(self):
        path = self._write("game:\n  grid_size: 5\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_invalid_difficulty(self):
        path = self._write("game:\n  difficulty: impossible\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_unknown_field(self):
        path = self._write("game:\n  board_colour: red\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_invalid_log_level(self):
        path = self._write("log:\n  level: loud\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_hint_strategies(self):
        settings = GameSettings(hint_strategies=["no_such_strategy"])
        with self.assertRaises(ValueError):
            settings.check_and_update()

        settings = GameSettings(hint_strategies=[])
        self.assertEqual(settings.check_and_update().hint_strategies, DEFAULT_HINT_STRATEGIES)

    def test_string_difficulty_is_coerced(self):
        settings = GameSettings(difficulty="Medium").check_and_update()

        self.assertEqual(settings.difficulty, Difficulty.MEDIUM)
