class UndoHistory:
    """Linear undo/redo over full grid snapshots."""

    def __init__(self, max_depth: int = 50):
        self.max_depth = max_depth
        self.undo_stack: list = []
        self.redo_stack: list = []

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def _push_undo(self, snap):
        self.undo_stack.append(snap)
        if len(self.undo_stack) > self.max_depth:
            self.undo_stack.pop(0)

    def save(self, grid):
        self._push_undo(grid.snapshot())
        self.redo_stack.clear()

    def undo(self, grid) -> bool:
        if not self.undo_stack:
            return False
        self.redo_stack.append(grid.snapshot())
        grid.restore(self.undo_stack.pop())
        return True

    def redo(self, grid) -> bool:
        if not self.redo_stack:
            return False
        self._push_undo(grid.snapshot())
        grid.restore(self.redo_stack.pop())
        return True

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()
