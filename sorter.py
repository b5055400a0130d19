from dataclasses import dataclass
from functools import cmp_to_key

from cell_coercion import parse_number


@dataclass(frozen=True)
class SortMarker:
    """Display-only record of the last column sort."""

    column: int
    ascending: bool


def _cell(row, col):
    return row[col] if 0 <= col < len(row) else ""


def compare_cells(a: str, b: str) -> int:
    # Numeric only when both sides parse; any other pair compares as text.
    na, nb = parse_number(a), parse_number(b)
    if na is not None and nb is not None:
        return (na > nb) - (na < nb)
    return (a > b) - (a < b)


def sort_rows(rows, col: int, ascending: bool = True, frozen_header: bool = False):
    """Return `rows` stably ordered by column `col`.

    With `frozen_header` the first row keeps its place and is excluded from
    the ordering.
    """
    rows = list(rows)
    if not rows:
        return rows
    header, body = ([rows[0]], rows[1:]) if frozen_header else ([], rows)
    sign = 1 if ascending else -1

    def cmp(left, right):
        return sign * compare_cells(_cell(left, col), _cell(right, col))

    return header + sorted(body, key=cmp_to_key(cmp))
