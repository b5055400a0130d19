import curses

import pytest

import input_events as ev
from key_bindings import CTRL_C, CTRL_V, CTRL_Z, translate_key


@pytest.mark.parametrize(
    "ch, expected",
    [
        (curses.KEY_DOWN, ev.Move(1, 0, False)),
        (curses.KEY_SRIGHT, ev.Move(0, 1, True)),
        (10, ev.Activate(2, 3)),
        (27, ev.Cancel()),
        (curses.KEY_DC, ev.ClearSelection()),
        (CTRL_C, ev.Copy()),
        (CTRL_V, ev.Paste()),
        (CTRL_Z, ev.Undo()),
        (curses.KEY_F6, ev.InsertRow(3)),
        (curses.KEY_IC, ev.AddRow()),
        (curses.KEY_F7, ev.InsertColumn(3)),
        (curses.KEY_F9, ev.DeleteRow(2)),
        (curses.KEY_F12, ev.SortColumn(3, False)),
        (ord("x"), ev.TextInput("x")),
        (ord("é"), ev.TextInput("é")),
    ],
)
def test_translate_key_when_idle(ch, expected):
    assert translate_key(ch, editing=False, cursor=(2, 3)) == expected


@pytest.mark.parametrize(
    "ch, expected",
    [
        (13, ev.Confirm()),
        (27, ev.Cancel()),
        (127, ev.EditKey("backspace")),
        (curses.KEY_LEFT, ev.EditKey("left")),
        (curses.KEY_HOME, ev.EditKey("home")),
        (CTRL_V, ev.Paste()),
        (ord("a"), ev.TextInput("a")),
        (curses.KEY_UP, None),
        (CTRL_Z, None),
    ],
)
def test_translate_key_while_editing(ch, expected):
    assert translate_key(ch, editing=True) == expected


def test_unmapped_key_is_ignored():
    assert translate_key(-1, editing=False) is None
