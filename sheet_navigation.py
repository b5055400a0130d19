from selection import CellRange, ColumnSelection, RowSelection, select_all


class SheetNavigation:
    """Selection changes: pointer drags, arrow moves, header picks, search hits."""

    def __init__(self, ctx, cell):
        self.ctx = ctx
        self.cell = cell

    # ---------- pointer ----------
    def press(self, row: int, col: int) -> bool:
        self.cell.commit()
        if not self.ctx.grid.has_cell(row, col):
            return False
        self.ctx.selection = CellRange.single(row, col)
        self.ctx.drag_anchor = (row, col)
        return True

    def drag_to(self, row: int, col: int) -> bool:
        anchor = self.ctx.drag_anchor
        if anchor is None:
            return False
        grid = self.ctx.grid
        row = max(0, min(row, grid.row_count - 1))
        col = max(0, min(col, grid.col_count - 1))
        self.ctx.selection = CellRange(anchor, (row, col))
        return True

    def release(self):
        self.ctx.drag_anchor = None

    # ---------- keyboard ----------
    def move(self, d_row: int, d_col: int, extend: bool = False) -> bool:
        # Arrow navigation is disabled while a cell is being edited.
        if self.ctx.edit.active:
            return False
        grid = self.ctx.grid
        if grid.is_empty:
            return False
        sel = self.ctx.selection
        if isinstance(sel, CellRange):
            anchor, current = sel.start, sel.end
        elif isinstance(sel, (RowSelection, ColumnSelection)):
            anchor = current = sel.anchor()
        else:
            anchor = current = (0, 0)

        new_row = max(0, min(current[0] + d_row, grid.row_count - 1))
        new_col = max(0, min(current[1] + d_col, grid.col_count - 1))
        if extend:
            self.ctx.selection = CellRange(anchor, (new_row, new_col))
        else:
            self.ctx.selection = CellRange.single(new_row, new_col)
        return True

    def select_row(self, row: int) -> bool:
        self.cell.commit()
        if not 0 <= row < self.ctx.grid.row_count:
            return False
        self.ctx.selection = RowSelection(row)
        self.ctx.drag_anchor = None
        return True

    def select_column(self, col: int) -> bool:
        self.cell.commit()
        if not 0 <= col < self.ctx.grid.col_count:
            return False
        self.ctx.selection = ColumnSelection(col)
        self.ctx.drag_anchor = None
        return True

    def select_all(self) -> bool:
        if self.ctx.edit.active:
            return False
        rng = select_all(self.ctx.grid)
        if rng is None:
            return False
        self.ctx.selection = rng
        return True

    # ---------- search ----------
    def find(self, query: str, case_sensitive: bool = False) -> int:
        count = self.ctx.search.perform(self.ctx.grid, query, case_sensitive)
        if not query:
            self.ctx._set_status("Search cleared", 2)
            return 0
        if not count:
            self.ctx._set_status(f"No matches for: {query}", 3)
            return 0
        self._goto(self.ctx.search.current)
        self.ctx._set_status(f"Match 1 of {count}", 2)
        return count

    def find_next(self) -> bool:
        return self._step(self.ctx.search.next())

    def find_prev(self) -> bool:
        return self._step(self.ctx.search.prev())

    def _step(self, coord) -> bool:
        if coord is None:
            return False
        self._goto(coord)
        search = self.ctx.search
        self.ctx._set_status(
            f"Match {search.position + 1} of {len(search.results)}", 2
        )
        return True

    def _goto(self, coord):
        self.cell.commit()
        self.ctx.selection = CellRange.single(*coord)
        self.ctx.drag_anchor = None
