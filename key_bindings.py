import curses

import input_events as ev

KEY_ENTER = (10, 13, curses.KEY_ENTER)
KEY_BACKSPACE = (curses.KEY_BACKSPACE, 127, 8)
KEY_ESC = 27

CTRL_A = 1
CTRL_E = 5
CTRL_G = 7
CTRL_K = 11
CTRL_R = 18
CTRL_T = 20
CTRL_V = 22
CTRL_W = 23
CTRL_X = 24
CTRL_Y = 25
CTRL_Z = 26
CTRL_C = 3

PAGE_ROWS = 10

_MOVES = {
    curses.KEY_UP: (-1, 0, False),
    curses.KEY_DOWN: (1, 0, False),
    curses.KEY_LEFT: (0, -1, False),
    curses.KEY_RIGHT: (0, 1, False),
    curses.KEY_SR: (-1, 0, True),
    curses.KEY_SF: (1, 0, True),
    curses.KEY_SLEFT: (0, -1, True),
    curses.KEY_SRIGHT: (0, 1, True),
    curses.KEY_PPAGE: (-PAGE_ROWS, 0, False),
    curses.KEY_NPAGE: (PAGE_ROWS, 0, False),
}

_EDIT_KEYS = {
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_DC: "delete",
}

HELP_LINES = [
    "Arrows move, Shift+arrows extend, PgUp/PgDn jump 10 rows",
    "Type to replace a cell, Enter/F2 edits, Enter commits, Esc cancels",
    "Del clears, ^C copy, ^X cut, ^V paste, ^A select all",
    "^Z undo, ^Y redo, ^F find, ^G/F3 next match, Shift+F3 previous",
    "F5/F6 insert row above/below, F7/F8 insert column left/right",
    "Ins appends a row, Shift+Ins appends a column",
    "F9 delete row, F10 delete column, F11/F12 sort asc/desc",
    "^R select row, ^K select column, ^E/^W widen/narrow column",
    "^T freeze header, ^S save, ^O open, ^N new, ^Q quit",
]


def _printable(ch):
    if ch < 32 or ch == 127 or ch >= 0x110000:
        return None
    if curses.KEY_MIN <= ch <= curses.KEY_MAX:
        return None
    try:
        return chr(ch)
    except ValueError:
        return None


def translate_key(ch, editing, cursor=(0, 0)):
    """Map a curses key code to an input event, or None if it has no meaning."""
    if editing:
        return _translate_editing(ch)

    row, col = cursor
    if ch in _MOVES:
        d_row, d_col, extend = _MOVES[ch]
        return ev.Move(d_row, d_col, extend)
    if ch in KEY_ENTER or ch == curses.KEY_F2:
        return ev.Activate(row, col)
    if ch == KEY_ESC:
        return ev.Cancel()
    if ch == curses.KEY_DC or ch in KEY_BACKSPACE:
        return ev.ClearSelection()

    simple = {
        CTRL_C: ev.Copy(),
        CTRL_X: ev.Cut(),
        CTRL_V: ev.Paste(),
        CTRL_A: ev.SelectAll(),
        CTRL_Z: ev.Undo(),
        CTRL_Y: ev.Redo(),
        CTRL_G: ev.FindNext(),
        CTRL_T: ev.ToggleFrozenHeader(),
        CTRL_R: ev.SelectRow(row),
        CTRL_K: ev.SelectColumn(col),
        CTRL_E: ev.ResizeColumn(col, 1),
        CTRL_W: ev.ResizeColumn(col, -1),
        curses.KEY_IC: ev.AddRow(),
        curses.KEY_SIC: ev.AddColumn(),
        curses.KEY_F3: ev.FindNext(),
        curses.KEY_F0 + 15: ev.FindPrev(),
        curses.KEY_F5: ev.InsertRow(row),
        curses.KEY_F6: ev.InsertRow(row + 1),
        curses.KEY_F7: ev.InsertColumn(col),
        curses.KEY_F8: ev.InsertColumn(col + 1),
        curses.KEY_F9: ev.DeleteRow(row),
        curses.KEY_F10: ev.DeleteColumn(col),
        curses.KEY_F11: ev.SortColumn(col, True),
        curses.KEY_F12: ev.SortColumn(col, False),
    }
    if ch in simple:
        return simple[ch]

    text = _printable(ch)
    if text is not None:
        return ev.TextInput(text)
    return None


def _translate_editing(ch):
    if ch in KEY_ENTER:
        return ev.Confirm()
    if ch == KEY_ESC:
        return ev.Cancel()
    if ch in KEY_BACKSPACE:
        return ev.EditKey("backspace")
    if ch in _EDIT_KEYS:
        return ev.EditKey(_EDIT_KEYS[ch])
    if ch == CTRL_V:
        return ev.Paste()
    text = _printable(ch)
    if text is not None:
        return ev.TextInput(text)
    return None
