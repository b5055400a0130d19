# ~/Apps/gridpad/grid_pane.py
import curses

from grid_model import column_letter
from selection import ColumnSelection, RowSelection


class GridPane:
    HEADER_H = 1
    MIN_GUTTER = 4

    def __init__(self):
        self.row_offset = 0
        self.col_offset = 0

        # Layout of the last draw; used to map mouse positions back to cells
        self.gutter_w = self.MIN_GUTTER
        self.rendered_rows: list[tuple[int, int]] = []  # (y, row)
        self.rendered_cols: list[tuple[int, int, int]] = []  # (x, width, col)

    def gutter_width(self, grid) -> int:
        return max(self.MIN_GUTTER, len(str(grid.row_count)) + 1)

    @staticmethod
    def columns_fitting(widths, start, col_count, avail_w):
        cols = []
        used = 0
        for c in range(max(0, start), col_count):
            cw = widths.get(c)
            if cols and used + cw + 1 > avail_w:
                break
            cols.append(c)
            used += cw + 1
        return cols

    # ---------- viewport ----------
    def follow(self, cursor, grid, widths, frozen_header, h, w):
        """Scroll so `cursor` stays visible in an h x w window."""
        row, col = cursor
        first_body = 1 if (frozen_header and grid.row_count > 0) else 0
        capacity = max(1, h - self.HEADER_H - first_body)

        self.row_offset = max(self.row_offset, first_body)
        if row >= first_body:
            if row < self.row_offset:
                self.row_offset = row
            elif row >= self.row_offset + capacity:
                self.row_offset = row - capacity + 1
        max_offset = max(first_body, grid.row_count - capacity)
        self.row_offset = max(first_body, min(self.row_offset, max_offset))

        avail_w = max(1, w - self.gutter_width(grid) - 1)
        if col < self.col_offset:
            self.col_offset = max(0, col)
        while self.col_offset < col and col not in self.columns_fitting(
            widths, self.col_offset, grid.col_count, avail_w
        ):
            self.col_offset += 1
        self.col_offset = max(0, min(self.col_offset, max(0, grid.col_count - 1)))

    def cell_at(self, y, x):
        """Return ("cell", r, c), ("row", r), ("col", c) or None for a screen position."""
        col = next((c for cx, cw, c in self.rendered_cols if cx <= x < cx + cw), None)
        if y < self.HEADER_H:
            return ("col", col) if col is not None else None
        row = next((r for ry, r in self.rendered_rows if ry == y), None)
        if row is None:
            return None
        if x < self.gutter_w:
            return ("row", row)
        if col is None:
            return None
        return ("cell", row, col)

    # ---------- rendering ----------
    @staticmethod
    def _put(win, y, x, text, n, attr=0):
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass

    def draw(self, win, editor):
        win.erase()
        h, w = win.getmaxyx()
        state = editor.state
        grid = state.grid
        widths = state.column_widths
        sel = editor.selection

        cursor = editor.cursor()
        if cursor is not None:
            self.follow(cursor, grid, widths, state.frozen_header, h, w)

        self.gutter_w = self.gutter_width(grid)
        avail_w = max(1, w - self.gutter_w - 1)
        cols = self.columns_fitting(widths, self.col_offset, grid.col_count, avail_w)

        # header
        self.rendered_cols = []
        marker = state.sort_marker
        x = self.gutter_w + 1
        for c in cols:
            if x >= w:
                break
            cw = min(widths.get(c), w - x)
            label = column_letter(c)
            if marker is not None and marker.column == c:
                label += " ^" if marker.ascending else " v"
            attr = curses.A_BOLD
            if isinstance(sel, ColumnSelection) and sel.col == c:
                attr |= curses.A_REVERSE
            self._put(win, 0, x, label.center(cw), cw, attr)
            self.rendered_cols.append((x, cw, c))
            x += cw + 1

        # rows
        frozen = state.frozen_header and grid.row_count > 0
        body = list(range(self.row_offset, grid.row_count))
        rows = ([0] if frozen else []) + body
        self.rendered_rows = []
        y = self.HEADER_H
        for r in rows:
            if y >= h:
                break
            self._draw_row(win, y, r, editor, cursor, header=frozen and r == 0)
            self.rendered_rows.append((y, r))
            y += 1

        win.refresh()

    def _draw_row(self, win, y, r, editor, cursor, header=False):
        grid = editor.grid
        sel = editor.selection
        edit = editor.edit

        gutter_attr = curses.A_BOLD
        if isinstance(sel, RowSelection) and sel.row == r:
            gutter_attr |= curses.A_REVERSE
        self._put(win, y, 0, str(r + 1).rjust(self.gutter_w - 1), self.gutter_w - 1, gutter_attr)

        for x, cw, c in self.rendered_cols:
            if edit.is_editing(r, c):
                self._draw_edit_cell(win, y, x, cw, edit)
                continue
            attr = curses.A_UNDERLINE if header else 0
            if sel.contains(grid, r, c):
                attr |= curses.A_REVERSE
                if cursor == (r, c):
                    attr |= curses.A_BOLD
            text = grid.get(r, c).replace("\t", " ").replace("\n", " ")
            self._put(win, y, x, text[:cw].ljust(cw), cw, attr)

    def _draw_edit_cell(self, win, y, x, cw, edit):
        scroll = max(0, edit.cursor - cw + 1)
        visible = edit.buffer[scroll : scroll + cw].ljust(cw)
        self._put(win, y, x, visible, cw, curses.A_UNDERLINE)
        cx = edit.cursor - scroll
        if 0 <= cx < cw:
            self._put(win, y, x + cx, visible[cx], 1, curses.A_REVERSE)
