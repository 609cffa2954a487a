import unittest

from parameterized import parameterized

from sudoku_engine.game.render import (
    format_time,
    parse_values,
    render_grid,
    render_hint,
    render_values,
)
from sudoku_engine.hints import Hint
from tests.tools import SOLUTION_4X4, copy_values, make_grid


class TestRender(unittest.TestCase):
    @parameterized.expand(
        [
            (0, False, "00m"),
            (59, False, "00m"),
            (125, False, "02m"),
            (125, True, "02:05"),
            (3600, True, "60:00"),
        ]
    )
    def test_format_time(self, seconds, show_seconds, expected):
        self.assertEqual(format_time(seconds, show_seconds), expected)

    def test_render_grid(self):
        grid = make_grid(SOLUTION_4X4, empty=[(0, 0), (1, 1), (2, 2)])
        grid[1][1].set_value(4)
        grid[2][2].set_value(2)

        lines = render_grid(grid, 4, selected=(0, 0), conflicts=[(2, 2)]).split("\n")

        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "[.]  2  |  3   4")
        self.assertEqual(lines[1], " 3   4' |  1   2")
        self.assertEqual(lines[2], "--------+--------")
        self.assertIn("2!", lines[3])

    def test_values_round_trip(self):
        values = copy_values(SOLUTION_4X4)
        values[0][0] = 0
        values[3][1] = 0
        text = render_values(values)

        self.assertEqual(text, ".234/3412/2143/4.21")
        self.assertEqual(parse_values(text), values)
        self.assertEqual(parse_values("0234 3412\n2143 4021"), values)

    @parameterized.expand(
        [
            ("123/412",),
            ("1234/3412/2143",),
            ("1234/3412/2143/43x1",),
            ("1234/3412/2143/4351",),
            ("",),
        ]
    )
    def test_parse_invalid_values(self, text):
        with self.assertRaises(ValueError):
            parse_values(text)

    def test_render_hint(self):
        hint = Hint(row=0, col=2, value=3, reason="Because.", technique="naked_single")

        self.assertEqual(render_hint(hint), "Try placing 3 in row 1, column 3.\nBecause.")
        self.assertIn("No hint available", render_hint(None))
