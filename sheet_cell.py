from selection import NO_SELECTION, CellRange


class SheetCell:
    """Edit session lifecycle: begin, type-to-edit, commit, cancel."""

    def __init__(self, ctx):
        self.ctx = ctx

    # ---------- Idle -> Editing ----------
    def begin_edit(self, row: int, col: int) -> bool:
        edit = self.ctx.edit
        if edit.is_editing(row, col):
            return True
        # Switching cells keeps what was typed in the previous one.
        self.commit()
        grid = self.ctx.grid
        if not grid.has_cell(row, col):
            return False
        edit.begin(row, col, grid.get(row, col))
        self.ctx.selection = NO_SELECTION
        self.ctx.drag_anchor = None
        return True

    def type_text(self, text: str) -> bool:
        if not text:
            return False
        edit = self.ctx.edit
        if edit.active:
            edit.insert(text)
            return True
        sel = self.ctx.selection
        if not (isinstance(sel, CellRange) and sel.is_single_cell):
            return False
        row, col = sel.start
        if not self.ctx.grid.has_cell(row, col):
            return False
        # Typing replaces the cell content rather than appending to it.
        edit.begin(row, col, text)
        self.ctx.selection = NO_SELECTION
        self.ctx.drag_anchor = None
        return True

    # ---------- Editing -> Idle ----------
    def commit(self):
        edit = self.ctx.edit
        if not edit.active:
            return None
        state = self.ctx.state
        previous = state.grid.get(*edit.cell)
        new_text = edit.buffer
        cell = edit.commit(state.grid)
        if cell is None:
            return None
        state.dirty = True
        marker = state.sort_marker
        if marker is not None and marker.column == cell[1] and new_text != previous:
            state.sort_marker = None
        return cell

    def confirm(self) -> bool:
        edit = self.ctx.edit
        if not edit.active:
            return False
        row, col = edit.cell
        self.commit()
        grid = self.ctx.grid
        if grid.row_count:
            self.ctx.selection = CellRange.single(min(row + 1, grid.row_count - 1), col)
        return True

    def cancel(self) -> bool:
        if self.ctx.edit.active:
            self.ctx.edit.cancel()
            return True
        self.ctx.selection = NO_SELECTION
        self.ctx.drag_anchor = None
        return False

    def focus_lost(self):
        return self.commit()

    # ---------- buffer keys ----------
    def edit_key(self, name: str) -> bool:
        edit = self.ctx.edit
        if not edit.active:
            return False
        if name == "backspace":
            edit.backspace()
        elif name == "delete":
            edit.delete_forward()
        elif name == "left":
            edit.move_cursor(-1)
        elif name == "right":
            edit.move_cursor(1)
        elif name == "home":
            edit.home()
        elif name == "end":
            edit.end()
        else:
            return False
        return True
