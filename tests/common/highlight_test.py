import unittest

from sudoku_engine.common.config import HighlightSettings
from sudoku_engine.common.grid import create_empty_grid
from sudoku_engine.common.highlight import get_highlighted_cells


class TestHighlight(unittest.TestCase):
    def setUp(self):
        self.grid = create_empty_grid(4)
        self.grid[0][0].set_value(1)
        self.grid[3][2].set_value(1)
        self.grid[2][3].set_value(2)

    def test_no_selection(self):
        highlights = get_highlighted_cells(None, None, self.grid, 4, HighlightSettings())

        self.assertEqual(highlights, [[""] * 4 for _ in range(4)])

    def test_all_highlights(self):
        highlights = get_highlighted_cells(0, 0, self.grid, 4, HighlightSettings())

        self.assertEqual(highlights[0][0], "")
        self.assertEqual(highlights[0][3], "highlighted")
        self.assertEqual(highlights[3][0], "highlighted")
        # (0, 1) is in the row, so not tagged again as part of the box
        self.assertEqual(highlights[0][1], "highlighted")
        self.assertEqual(highlights[1][1], "highlighted-box")
        self.assertEqual(highlights[3][2], "highlighted-same-number")
        self.assertEqual(highlights[2][3], "")

    def test_tags_combine(self):
        self.grid[0][2].set_value(1)
        highlights = get_highlighted_cells(0, 0, self.grid, 4, HighlightSettings())

        self.assertEqual(highlights[0][2], "highlighted highlighted-same-number")

    def test_settings_disable_highlights(self):
        settings = HighlightSettings(
            highlight_row_column=False, highlight_box=True, highlight_same_numbers=False
        )
        highlights = get_highlighted_cells(0, 0, self.grid, 4, settings)

        self.assertEqual(highlights[0][1], "highlighted-box")
        self.assertEqual(highlights[1][0], "highlighted-box")
        self.assertEqual(highlights[0][3], "")
        self.assertEqual(highlights[3][2], "")

    def test_empty_selected_cell_has_no_same_number_tags(self):
        highlights = get_highlighted_cells(1, 2, self.grid, 4, HighlightSettings())

        self.assertNotIn("highlighted-same-number", " ".join(" ".join(row) for row in highlights))
        self.assertEqual(highlights[0][3], "highlighted-box")
