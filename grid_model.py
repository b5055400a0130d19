import pandas as pd


DEFAULT_ROWS = 20
DEFAULT_COLS = 10


def column_letter(idx: int) -> str:
    result = ""
    num = idx + 1
    while num > 0:
        num -= 1
        result = chr(ord("A") + num % 26) + result
        num //= 26
    return result


def shift_on_insert(index, at):
    if index is None:
        return None
    return index + 1 if index >= at else index


def shift_on_delete(index, at):
    """Return the tracked index after removing `at`, or None if it was removed."""
    if index is None or index == at:
        return None
    return index - 1 if index > at else index


def _cell_text(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


class Grid:
    """Rectangular matrix of text cells.

    Every public operation leaves all rows at equal length. Coordinates that
    fall outside the current extent are ignored rather than reported.
    """

    def __init__(self, rows=None):
        self.rows: list[list[str]] = [list(r) for r in rows] if rows else []
        self.normalize()

    # ---------- construction ----------
    @classmethod
    def blank(cls, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> "Grid":
        return cls([[""] * cols for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        return cls([[_cell_text(v) for v in row] for row in rows or []])

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Grid":
        return cls.from_rows(df.itertuples(index=False, name=None))

    def to_rows(self) -> list[list[str]]:
        return [list(r) for r in self.rows]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_rows(), dtype=object)

    # ---------- snapshots ----------
    def snapshot(self) -> list[list[str]]:
        return self.to_rows()

    def restore(self, snapshot) -> None:
        self.rows = [list(r) for r in snapshot]

    # ---------- queries ----------
    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0 or self.col_count == 0

    def has_cell(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])

    def get(self, row: int, col: int) -> str:
        if not self.has_cell(row, col):
            return ""
        return self.rows[row][col]

    # ---------- cell mutation ----------
    def set(self, row: int, col: int, text: str) -> bool:
        if not self.has_cell(row, col):
            return False
        self.rows[row][col] = text
        return True

    def clear_cells(self, coords) -> int:
        cleared = 0
        for r, c in coords:
            if self.set(r, c, ""):
                cleared += 1
        return cleared

    def normalize(self) -> None:
        width = self.col_count
        for row in self.rows:
            if len(row) < width:
                row.extend([""] * (width - len(row)))

    # ---------- structure ----------
    def _new_row_width(self) -> int:
        return len(self.rows[0]) if self.rows else DEFAULT_COLS

    def add_row(self) -> None:
        self.rows.append([""] * self._new_row_width())

    def add_column(self) -> None:
        if not self.rows:
            self.rows.append([""])
            return
        for row in self.rows:
            row.append("")

    def insert_row_at(self, row: int) -> bool:
        if row < 0 or row > len(self.rows):
            return False
        self.rows.insert(row, [""] * self._new_row_width())
        return True

    def insert_column_at(self, col: int) -> bool:
        if not self.rows:
            if col != 0:
                return False
            self.rows.append([""])
            return True
        if col < 0 or col > self.col_count:
            return False
        for row in self.rows:
            row.insert(min(col, len(row)), "")
        self.normalize()
        return True

    def delete_row(self, row: int) -> bool:
        if row < 0 or row >= len(self.rows):
            return False
        del self.rows[row]
        return True

    def delete_column(self, col: int) -> bool:
        if col < 0 or col >= self.col_count:
            return False
        for row in self.rows:
            if col < len(row):
                del row[col]
        return True

    def __eq__(self, other):
        if isinstance(other, Grid):
            return self.rows == other.rows
        return NotImplemented

    def __repr__(self):
        return f"Grid({self.row_count}x{self.col_count})"
