class ColumnWidths:
    """Sparse per-column display widths, in terminal cells."""

    def __init__(self, default: int = 12, minimum: int = 3, maximum: int = 60):
        self.default = default
        self.minimum = minimum
        self.maximum = maximum
        self._widths: dict[int, int] = {}

    def get(self, col: int) -> int:
        return self._widths.get(col, self.default)

    def set(self, col: int, width: int) -> int:
        width = max(self.minimum, min(self.maximum, int(width)))
        self._widths[col] = width
        return width

    def resize(self, col: int, delta: int) -> int:
        return self.set(col, self.get(col) + delta)

    def reset(self):
        self._widths = {}

    def items(self):
        return sorted(self._widths.items())

    def shift_for_insert(self, col: int):
        self._widths = {
            (idx + 1 if idx >= col else idx): width
            for idx, width in self._widths.items()
        }

    def shift_for_delete(self, col: int):
        self._widths.pop(col, None)
        self._widths = {
            (idx - 1 if idx > col else idx): width
            for idx, width in self._widths.items()
        }

    def __contains__(self, col):
        return col in self._widths

    def __len__(self):
        return len(self._widths)
