from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Coord = Tuple[int, int]
Bounds = Tuple[int, int, int, int]  # (min_row, max_row, min_col, max_col)


@dataclass(frozen=True)
class NoSelection:
    is_single_cell = False

    def bounds(self, grid) -> Optional[Bounds]:
        return None

    def contains(self, grid, row: int, col: int) -> bool:
        return False

    def cells(self, grid) -> Iterator[Coord]:
        return iter(())

    def anchor(self) -> Coord:
        return (0, 0)

    def extract_text(self, grid) -> str:
        return ""

    def clear(self, grid) -> int:
        return 0


@dataclass(frozen=True)
class CellRange:
    """Rectangle between two corners given in any order."""

    start: Coord
    end: Coord

    @classmethod
    def single(cls, row: int, col: int) -> "CellRange":
        return cls((row, col), (row, col))

    @property
    def is_single_cell(self) -> bool:
        return self.start == self.end

    def normalized(self) -> Bounds:
        (sr, sc), (er, ec) = self.start, self.end
        return (min(sr, er), max(sr, er), min(sc, ec), max(sc, ec))

    def bounds(self, grid=None) -> Bounds:
        return self.normalized()

    def contains(self, grid, row: int, col: int) -> bool:
        r0, r1, c0, c1 = self.normalized()
        return r0 <= row <= r1 and c0 <= col <= c1

    def cells(self, grid) -> Iterator[Coord]:
        r0, r1, c0, c1 = self.normalized()
        for r in range(max(r0, 0), min(r1, grid.row_count - 1) + 1):
            for c in range(max(c0, 0), min(c1, len(grid.rows[r]) - 1) + 1):
                yield (r, c)

    def anchor(self) -> Coord:
        r0, _, c0, _ = self.normalized()
        return (r0, c0)

    def extract_text(self, grid) -> str:
        # Cells outside the grid are emitted empty so the block stays rectangular.
        r0, r1, c0, c1 = self.normalized()
        lines = []
        for r in range(r0, r1 + 1):
            lines.append("\t".join(grid.get(r, c) for c in range(c0, c1 + 1)))
        return "\n".join(lines)

    def clear(self, grid) -> int:
        return grid.clear_cells(list(self.cells(grid)))


@dataclass(frozen=True)
class ColumnSelection:
    col: int
    is_single_cell = False

    def bounds(self, grid) -> Optional[Bounds]:
        if grid.row_count == 0:
            return None
        return (0, grid.row_count - 1, self.col, self.col)

    def contains(self, grid, row: int, col: int) -> bool:
        return col == self.col and grid.has_cell(row, col)

    def cells(self, grid) -> Iterator[Coord]:
        for r, row in enumerate(grid.rows):
            if self.col < len(row):
                yield (r, self.col)

    def anchor(self) -> Coord:
        return (0, self.col)

    def extract_text(self, grid) -> str:
        return "\n".join(grid.get(r, self.col) for r in range(grid.row_count))

    def clear(self, grid) -> int:
        return grid.clear_cells(list(self.cells(grid)))


@dataclass(frozen=True)
class RowSelection:
    row: int
    is_single_cell = False

    def bounds(self, grid) -> Optional[Bounds]:
        if not 0 <= self.row < grid.row_count or grid.col_count == 0:
            return None
        return (self.row, self.row, 0, grid.col_count - 1)

    def contains(self, grid, row: int, col: int) -> bool:
        return row == self.row and grid.has_cell(row, col)

    def cells(self, grid) -> Iterator[Coord]:
        if 0 <= self.row < grid.row_count:
            for c in range(len(grid.rows[self.row])):
                yield (self.row, c)

    def anchor(self) -> Coord:
        return (self.row, 0)

    def extract_text(self, grid) -> str:
        if not 0 <= self.row < grid.row_count:
            return ""
        return "\t".join(grid.rows[self.row])

    def clear(self, grid) -> int:
        return grid.clear_cells(list(self.cells(grid)))


Selection = Union[NoSelection, CellRange, ColumnSelection, RowSelection]

NO_SELECTION = NoSelection()


def select_all(grid) -> Optional[CellRange]:
    if grid.row_count == 0 or grid.col_count == 0:
        return None
    return CellRange((0, 0), (grid.row_count - 1, grid.col_count - 1))
