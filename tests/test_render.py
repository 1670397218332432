import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wall_maze.core.grid import Cell, WallGrid
from wall_maze.viz.text import CORNER_GLYPHS, corner_glyph, render_text

CLOSED_3X3 = "\n".join([
    "┌───┬───┬───┐",
    "│   │   │   │",
    "├───┼───┼───┤",
    "│   │   │   │",
    "├───┼───┼───┤",
    "│   │   │   │",
    "└───┴───┴───┘",
])

class TestTextRenderer(unittest.TestCase):
    def test_closed_3x3(self):
        self.assertEqual(render_text(WallGrid(3, 3)), CLOSED_3X3)

    def test_no_trailing_newline(self):
        self.assertFalse(render_text(WallGrid(2, 2)).endswith("\n"))

    def test_single_cell(self):
        self.assertEqual(render_text(WallGrid(1, 1)), "┌───┐\n│   │\n└───┘")

    def test_open_north_of_first_cell(self):
        grid = WallGrid(3, 3)
        grid.open_north(Cell(0, 0))
        expected = "\n".join([
            "┌───┬───┬───┐",
            "│   │   │   │",
            "├───┼───┼───┤",
            "│   │   │   │",
            "│   ├───┼───┤",
            "│   │   │   │",
            "└───┴───┴───┘",
        ])
        self.assertEqual(render_text(grid), expected)

    def test_open_east_of_first_cell(self):
        grid = WallGrid(3, 3)
        grid.open_east(Cell(0, 0))
        expected = "\n".join([
            "┌───┬───┬───┐",
            "│   │   │   │",
            "├───┼───┼───┤",
            "│   │   │   │",
            "├───┴───┼───┤",
            "│       │   │",
            "└───────┴───┘",
        ])
        self.assertEqual(render_text(grid), expected)

    def test_open_north_of_second_cell(self):
        grid = WallGrid(3, 3)
        grid.open_north(Cell(1, 0))
        lines = render_text(grid).split("\n")
        self.assertEqual(lines[4], "├───┤   ├───┤")

    def test_bottom_row_is_last(self):
        # y = 0 is drawn at the bottom of the text
        grid = WallGrid(2, 3)
        grid.open_east(Cell(0, 0))
        lines = render_text(grid).split("\n")
        self.assertEqual(lines[-2], "│       │")
        self.assertEqual(lines[1], "│   │   │")

    def test_corner_table_complete(self):
        self.assertEqual(len(CORNER_GLYPHS), 16)
        self.assertEqual(len(set(CORNER_GLYPHS.values())), 16)

    def test_corner_glyph_grid_corners(self):
        grid = WallGrid(2, 2)
        self.assertEqual(corner_glyph(grid, 0, 0), "└")
        self.assertEqual(corner_glyph(grid, 0, 2), "┌")
        self.assertEqual(corner_glyph(grid, 2, 0), "┘")
        self.assertEqual(corner_glyph(grid, 2, 2), "┐")

    def test_corner_glyph_edges(self):
        grid = WallGrid(2, 2)
        self.assertEqual(corner_glyph(grid, 0, 1), "├")
        self.assertEqual(corner_glyph(grid, 2, 1), "┤")
        self.assertEqual(corner_glyph(grid, 1, 0), "┴")
        self.assertEqual(corner_glyph(grid, 1, 2), "┬")

        grid.open_north(Cell(0, 0))
        grid.open_north(Cell(1, 0))
        grid.open_east(Cell(0, 0))
        grid.open_east(Cell(0, 1))
        self.assertEqual(corner_glyph(grid, 0, 1), "│")
        self.assertEqual(corner_glyph(grid, 2, 1), "│")
        self.assertEqual(corner_glyph(grid, 1, 0), "─")
        self.assertEqual(corner_glyph(grid, 1, 2), "─")
        # Nothing touches the middle point any more
        self.assertEqual(corner_glyph(grid, 1, 1), " ")

    def test_corner_glyph_out_of_bounds(self):
        with self.assertRaises(IndexError):
            corner_glyph(WallGrid(2, 2), 3, 0)

if __name__ == '__main__':
    unittest.main()
