"""Discrete input signals consumed by the sheet editor.

The terminal front-end translates key presses into these; tests build them
directly.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Press:
    """Pointer down on a cell: select it and start a drag."""

    row: int
    col: int


@dataclass(frozen=True)
class DragTo:
    row: int
    col: int


@dataclass(frozen=True)
class Release:
    pass


@dataclass(frozen=True)
class Activate:
    """Begin editing a cell with its current text (double click, Enter)."""

    row: int
    col: int


@dataclass(frozen=True)
class Move:
    d_row: int
    d_col: int
    extend: bool = False


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class TextInput:
    text: str


@dataclass(frozen=True)
class EditKey:
    """Cursor and deletion keys inside the edit buffer."""

    name: str  # backspace | delete | left | right | home | end


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class ClearSelection:
    pass


@dataclass(frozen=True)
class ClearCell:
    row: int
    col: int


@dataclass(frozen=True)
class Copy:
    pass


@dataclass(frozen=True)
class Cut:
    pass


@dataclass(frozen=True)
class Paste:
    """Paste `text`, or the clipboard contents when `text` is None."""

    text: str | None = None


@dataclass(frozen=True)
class SelectAll:
    pass


@dataclass(frozen=True)
class SelectRow:
    row: int


@dataclass(frozen=True)
class SelectColumn:
    col: int


@dataclass(frozen=True)
class Find:
    query: str
    case_sensitive: bool = False


@dataclass(frozen=True)
class FindNext:
    pass


@dataclass(frozen=True)
class FindPrev:
    pass


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class AddRow:
    pass


@dataclass(frozen=True)
class AddColumn:
    pass


@dataclass(frozen=True)
class InsertRow:
    at: int


@dataclass(frozen=True)
class InsertColumn:
    at: int


@dataclass(frozen=True)
class DeleteRow:
    row: int


@dataclass(frozen=True)
class DeleteColumn:
    col: int


@dataclass(frozen=True)
class SortColumn:
    col: int
    ascending: bool = True


@dataclass(frozen=True)
class ResizeColumn:
    col: int
    delta: int


@dataclass(frozen=True)
class ToggleFrozenHeader:
    pass
