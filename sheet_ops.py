from sorter import SortMarker, sort_rows


def _plural(n, word):
    return f"{n} {word}{'s' if n != 1 else ''}"


class SheetOps:
    """Grid-level operations: structure, clearing, sorting, column widths."""

    def __init__(self, ctx, cell, undo_mgr):
        self.ctx = ctx
        self.cell = cell
        self.undo_mgr = undo_mgr

    # ----- rows -----
    def add_row(self):
        self.undo_mgr.push_undo()
        self.ctx.grid.add_row()
        self.ctx._set_status("Row added", 2)

    def insert_row_at(self, row: int) -> bool:
        grid = self.ctx.grid
        if not 0 <= row <= grid.row_count:
            return False
        self.undo_mgr.push_undo()
        grid.insert_row_at(row)
        self.ctx.edit.on_row_inserted(row)
        self.ctx._set_status(f"Inserted row {row + 1}", 2)
        return True

    def delete_row(self, row: int) -> bool:
        grid = self.ctx.grid
        if not 0 <= row < grid.row_count:
            return False
        self.undo_mgr.push_undo()
        grid.delete_row(row)
        self.ctx.edit.on_row_deleted(row)
        self.ctx._set_status(f"Deleted row {row + 1}", 2)
        return True

    # ----- columns -----
    def add_column(self):
        self.undo_mgr.push_undo()
        self.ctx.grid.add_column()
        self.ctx._set_status("Column added", 2)

    def insert_column_at(self, col: int) -> bool:
        grid = self.ctx.grid
        if not 0 <= col <= grid.col_count:
            return False
        self.undo_mgr.push_undo()
        grid.insert_column_at(col)
        self.ctx.state.column_widths.shift_for_insert(col)
        self.ctx.edit.on_column_inserted(col)
        self.ctx._set_status(f"Inserted column {col + 1}", 2)
        return True

    def delete_column(self, col: int) -> bool:
        grid = self.ctx.grid
        if not 0 <= col < grid.col_count:
            return False
        self.undo_mgr.push_undo()
        grid.delete_column(col)
        self.ctx.state.column_widths.shift_for_delete(col)
        self.ctx.edit.on_column_deleted(col)
        self.ctx._set_status(f"Deleted column {col + 1}", 2)
        return True

    def resize_column(self, col: int, delta: int) -> int:
        if col < 0:
            return 0
        width = self.ctx.state.column_widths.resize(col, delta)
        self.ctx._set_status(f"Column width {width}", 1)
        return width

    # ----- clearing -----
    def clear_selection(self) -> int:
        if self.ctx.edit.active:
            return 0
        sel = self.ctx.selection
        cells = list(sel.cells(self.ctx.grid))
        if not cells:
            return 0
        self.undo_mgr.push_undo()
        cleared = self.ctx.grid.clear_cells(cells)
        self.ctx._set_status(f"Cleared {_plural(cleared, 'cell')}", 2)
        return cleared

    def clear_cell(self, row: int, col: int) -> bool:
        grid = self.ctx.grid
        if not grid.has_cell(row, col):
            return False
        if self.ctx.edit.is_editing(row, col):
            self.ctx.edit.cancel()
        self.undo_mgr.push_undo()
        grid.set(row, col, "")
        return True

    # ----- sorting -----
    def sort_by_column(self, col: int, ascending: bool = True) -> bool:
        grid = self.ctx.grid
        if grid.row_count == 0 or not 0 <= col < grid.col_count:
            return False
        # Row order is about to change under the edited cell.
        self.cell.commit()
        self.undo_mgr.push_undo()
        state = self.ctx.state
        grid.rows = sort_rows(grid.rows, col, ascending, state.frozen_header)
        state.sort_marker = SortMarker(col, ascending)
        direction = "ascending" if ascending else "descending"
        self.ctx._set_status(f"Sorted by column {col + 1} ({direction})", 2)
        return True

    def toggle_frozen_header(self) -> bool:
        state = self.ctx.state
        state.frozen_header = not state.frozen_header
        self.ctx._set_status(
            "Header row frozen" if state.frozen_header else "Header row unfrozen", 2
        )
        return state.frozen_header
