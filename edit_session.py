from typing import Optional, Tuple

from grid_model import shift_on_delete, shift_on_insert


class EditSession:
    """Single-cell edit buffer: Idle when `cell` is None, otherwise Editing."""

    def __init__(self):
        self.cell: Optional[Tuple[int, int]] = None
        self.buffer = ""
        self.cursor = 0

    @property
    def active(self) -> bool:
        return self.cell is not None

    def is_editing(self, row: int, col: int) -> bool:
        return self.cell == (row, col)

    def begin(self, row: int, col: int, seed: str = ""):
        self.cell = (row, col)
        self.buffer = seed
        self.cursor = len(seed)

    def commit(self, grid):
        """Write the buffer into its cell verbatim and return to Idle.

        Returns the written coordinate, or None if nothing was written.
        """
        if self.cell is None:
            return None
        row, col = self.cell
        written = grid.set(row, col, self.buffer)
        self._reset()
        return (row, col) if written else None

    def cancel(self):
        self._reset()

    def _reset(self):
        self.cell = None
        self.buffer = ""
        self.cursor = 0

    # ---------- buffer editing ----------
    def insert(self, text: str):
        buf = self.buffer
        self.buffer = buf[: self.cursor] + text + buf[self.cursor :]
        self.cursor += len(text)

    def backspace(self):
        if self.cursor > 0:
            buf = self.buffer
            self.buffer = buf[: self.cursor - 1] + buf[self.cursor :]
            self.cursor -= 1

    def delete_forward(self):
        if self.cursor < len(self.buffer):
            buf = self.buffer
            self.buffer = buf[: self.cursor] + buf[self.cursor + 1 :]

    def move_cursor(self, delta: int):
        self.cursor = max(0, min(len(self.buffer), self.cursor + delta))

    def home(self):
        self.cursor = 0

    def end(self):
        self.cursor = len(self.buffer)

    # ---------- structural tracking ----------
    def on_row_inserted(self, at: int):
        if self.cell is not None:
            self.cell = (shift_on_insert(self.cell[0], at), self.cell[1])

    def on_column_inserted(self, at: int):
        if self.cell is not None:
            self.cell = (self.cell[0], shift_on_insert(self.cell[1], at))

    def on_row_deleted(self, at: int):
        if self.cell is None:
            return
        row = shift_on_delete(self.cell[0], at)
        if row is None:
            self._reset()
        else:
            self.cell = (row, self.cell[1])

    def on_column_deleted(self, at: int):
        if self.cell is None:
            return
        col = shift_on_delete(self.cell[1], at)
        if col is None:
            self._reset()
        else:
            self.cell = (self.cell[0], col)
