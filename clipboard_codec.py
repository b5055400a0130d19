"""Spreadsheet-compatible clipboard text.

Fields are separated by tabs and records by newlines. Separators embedded in a
cell are not escaped, so such a cell splits into several cells on paste.
"""
from typing import Optional

from selection import CellRange

FIELD_SEP = "\t"
RECORD_SEP = "\n"


def extract_text(grid, selection) -> str:
    return selection.extract_text(grid)


def split_records(text: str) -> list[list[str]]:
    if not text:
        return []
    lines = text.split(RECORD_SEP)
    if text.endswith(RECORD_SEP):
        lines.pop()
    records = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        records.append(line.split(FIELD_SEP))
    return records


def paste_text(grid, text: str, anchor=(0, 0)) -> Optional[CellRange]:
    """Write `text` into `grid` starting at `anchor`, growing the grid as needed.

    Rows appended during the paste take the widest row length at the time they
    are created; the grid is normalized once every cell has been written.
    Returns the rectangle that received the text, or None if nothing was pasted.
    """
    records = split_records(text)
    if not records:
        return None

    start_row, start_col = anchor
    widest = 0
    for row_offset, cells in enumerate(records):
        row_idx = start_row + row_offset
        while row_idx >= grid.row_count:
            grid.rows.append([""] * grid.col_count)
        target = grid.rows[row_idx]
        for col_offset, cell_text in enumerate(cells):
            col_idx = start_col + col_offset
            while col_idx >= len(target):
                target.append("")
            target[col_idx] = cell_text
        widest = max(widest, len(cells))

    grid.normalize()
    return CellRange(
        (start_row, start_col),
        (start_row + len(records) - 1, start_col + widest - 1),
    )
