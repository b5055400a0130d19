import unittest

import pytest

from cell_coercion import parse_number
from sorter import compare_cells, sort_rows


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", 10.0),
        ("-2.5", -2.5),
        ("1e3", 1000.0),
        ("", None),
        ("abc", None),
        (" 1", None),
        ("1_000", None),
        ("nan", None),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_compare_cells_mixes_numeric_and_text():
    assert compare_cells("2", "10") < 0
    assert compare_cells("10", "2") > 0
    assert compare_cells("2", "2.0") == 0
    # a non-numeric side falls back to text ordering
    assert compare_cells("10", "b") < 0
    assert compare_cells("", "1") < 0


class SortRowsTests(unittest.TestCase):
    def test_numeric_then_text_ordering(self):
        rows = [["10"], ["2"], ["b"], ["a"]]
        self.assertEqual(sort_rows(rows, 0), [["2"], ["10"], ["a"], ["b"]])

    def test_sort_is_stable(self):
        rows = [["1", "first"], ["0", "x"], ["1", "second"], ["1", "third"]]
        result = sort_rows(rows, 0)
        self.assertEqual([r[1] for r in result], ["x", "first", "second", "third"])

    def test_descending_keeps_ties_in_order(self):
        rows = [["1", "first"], ["2", "x"], ["1", "second"]]
        result = sort_rows(rows, 0, ascending=False)
        self.assertEqual([r[1] for r in result], ["x", "first", "second"])

    def test_frozen_header_stays_first(self):
        rows = [["qty"], ["3"], ["1"]]
        self.assertEqual(sort_rows(rows, 0, frozen_header=True), [["qty"], ["1"], ["3"]])

    def test_missing_column_sorts_as_empty(self):
        rows = [["b", "2"], ["a"]]
        self.assertEqual(sort_rows(rows, 1), [["a"], ["b", "2"]])

    def test_scenario_rows_sort_numbers_before_text(self):
        rows = [["b"], ["a"], ["10"], ["2"]]
        self.assertEqual(sort_rows(rows, 0), [["2"], ["10"], ["a"], ["b"]])

    def test_sorting_twice_is_idempotent(self):
        rows = [["b", "1"], ["10", "2"], ["a", "3"], ["10", "4"], ["2", "5"], ["", "6"]]
        for ascending in (True, False):
            once = sort_rows(rows, 0, ascending)
            self.assertEqual(sort_rows(once, 0, ascending), once)

    def test_empty_rows(self):
        self.assertEqual(sort_rows([], 0), [])


if __name__ == "__main__":
    unittest.main()
