import unittest

from app_state import AppState
from column_widths import ColumnWidths
from grid_model import Grid
from grid_pane import GridPane
from selection import CellRange
from sheet_editor import SheetEditor
from sorter import SortMarker


class DummyWin:
    def __init__(self, h=24, w=120):
        self._h = h
        self._w = w
        self.calls = []

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.calls = []

    def addnstr(self, y, x, text, n, attr=0):
        self.calls.append((y, x, text[:n], attr))

    def refresh(self):
        pass

    def text_at(self, y):
        return "".join(text for cy, _, text, _ in sorted(self.calls, key=lambda c: c[1]) if cy == y)


class GridPaneFollowTests(unittest.TestCase):
    def test_follow_scrolls_down_to_cursor(self):
        grid = Grid.blank(100, 3)
        pane = GridPane()
        pane.follow((50, 0), grid, ColumnWidths(), False, 11, 80)
        # 10 body rows fit below the header line
        self.assertEqual(pane.row_offset, 41)
        pane.follow((5, 0), grid, ColumnWidths(), False, 11, 80)
        self.assertEqual(pane.row_offset, 5)

    def test_follow_with_frozen_header_never_scrolls_row_zero_into_body(self):
        grid = Grid.blank(100, 3)
        pane = GridPane()
        pane.follow((0, 0), grid, ColumnWidths(), True, 11, 80)
        self.assertEqual(pane.row_offset, 1)

    def test_follow_shifts_columns_until_cursor_fits(self):
        grid = Grid.blank(1, 50)
        widths = ColumnWidths(default=10)
        pane = GridPane()
        pane.follow((0, 49), grid, widths, False, 10, 80)
        visible = pane.columns_fitting(widths, pane.col_offset, grid.col_count, 80 - pane.gutter_width(grid) - 1)
        self.assertIn(49, visible)
        pane.follow((0, 0), grid, widths, False, 10, 80)
        self.assertEqual(pane.col_offset, 0)

    def test_offsets_clamp_after_grid_shrinks(self):
        pane = GridPane()
        pane.row_offset = 90
        pane.follow((0, 0), Grid.blank(3, 3), ColumnWidths(), False, 11, 80)
        self.assertEqual(pane.row_offset, 0)


class GridPaneDrawTests(unittest.TestCase):
    def _draw(self, rows, **state_kwargs):
        state = AppState(Grid(rows), **state_kwargs)
        editor = SheetEditor(state)
        pane = GridPane()
        win = DummyWin(10, 60)
        pane.draw(win, editor)
        return pane, win, editor

    def test_header_shows_letters_and_sort_marker(self):
        state = AppState(Grid([["1", "2"]]))
        state.sort_marker = SortMarker(1, False)
        pane = GridPane()
        win = DummyWin(10, 60)
        pane.draw(win, SheetEditor(state))
        header = win.text_at(0)
        self.assertIn("A", header)
        self.assertIn("B v", header)

    def test_cell_at_maps_screen_positions(self):
        pane, win, _ = self._draw([["a", "b"], ["c", "d"]])
        x0, w0, _ = pane.rendered_cols[0]
        x1, _, _ = pane.rendered_cols[1]
        self.assertEqual(pane.cell_at(1, x0), ("cell", 0, 0))
        self.assertEqual(pane.cell_at(2, x1 + 1), ("cell", 1, 1))
        self.assertEqual(pane.cell_at(2, 0), ("row", 1))
        self.assertEqual(pane.cell_at(0, x1), ("col", 1))
        self.assertIsNone(pane.cell_at(8, x0))

    def test_frozen_header_row_is_drawn_first(self):
        rows = [["head"]] + [[str(i)] for i in range(50)]
        state = AppState(Grid(rows), frozen_header=True)
        editor = SheetEditor(state)
        editor.selection = CellRange.single(40, 0)
        pane = GridPane()
        pane.row_offset = 30
        win = DummyWin(10, 60)
        pane.draw(win, editor)
        self.assertEqual(pane.rendered_rows[0], (1, 0))
        self.assertIn("head", win.text_at(1))
        self.assertIn((9, 40), pane.rendered_rows)


if __name__ == "__main__":
    unittest.main()
