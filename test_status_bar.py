import time

from sorter import SortMarker
from status_bar import cell_name, render_status


def test_cell_name():
    assert cell_name((0, 0)) == "A1"
    assert cell_name((9, 27)) == "AB10"
    assert cell_name(None) == ""


def test_status_shows_document_summary():
    text = render_status(
        {
            "editing": True,
            "dirty": True,
            "file_path": "/tmp/data/sales.csv",
            "shape": (20, 10),
            "cursor": (2, 1),
            "sort_marker": SortMarker(1, True),
            "frozen_header": True,
        },
        200,
    )
    assert text.startswith(" EDIT | sales.csv * | 20x10 | B3 | sorted B asc | header frozen")
    assert len(text) == 200


def test_fresh_message_wins_over_summary():
    text = render_status(
        {"status_msg": "Saved", "status_until": time.time() + 5, "shape": (1, 1)},
        20,
    )
    assert text == " Saved".ljust(20)


def test_expired_message_is_hidden():
    text = render_status(
        {"status_msg": "Saved", "status_until": time.time() - 1, "shape": (1, 1)},
        40,
    )
    assert text.startswith(" READY | [new] | 1x1")
