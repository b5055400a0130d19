class SheetUndo:
    """Snapshots the grid before mutations and restores it on undo/redo."""

    def __init__(self, ctx):
        self.ctx = ctx

    def push_undo(self):
        state = self.ctx.state
        state.history.save(state.grid)
        state.dirty = True
        # Any mutation may break the displayed sort order; sort re-sets it.
        state.sort_marker = None
        # Match coordinates refer to the grid before this change.
        self.ctx.search.clear()

    def undo(self) -> bool:
        if self.ctx.edit.active:
            self.ctx._set_status("Finish editing before undo", 2)
            return False
        state = self.ctx.state
        if not state.history.undo(state.grid):
            self.ctx._set_status("Nothing to undo", 2)
            return False
        self._after_restore()
        remaining = len(state.history.undo_stack)
        self.ctx._set_status(f"Undone ({remaining} more)" if remaining else "Undone", 2)
        return True

    def redo(self) -> bool:
        if self.ctx.edit.active:
            self.ctx._set_status("Finish editing before redo", 2)
            return False
        state = self.ctx.state
        if not state.history.redo(state.grid):
            self.ctx._set_status("Nothing to redo", 2)
            return False
        self._after_restore()
        remaining = len(state.history.redo_stack)
        self.ctx._set_status(f"Redone ({remaining} more)" if remaining else "Redone", 2)
        return True

    def _after_restore(self):
        state = self.ctx.state
        state.dirty = True
        state.sort_marker = None
        self.ctx.drag_anchor = None
        self.ctx.search.clear()
