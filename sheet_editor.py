import input_events as ev
from clipboard import ClipboardTransport
from file_type_handler import DocumentError, FileTypeHandler, parse_bytes
from logger import get_logger
from sheet_cell import SheetCell
from sheet_clipboard import SheetClipboard
from sheet_context import SheetContext
from sheet_navigation import SheetNavigation
from sheet_ops import SheetOps
from sheet_undo import SheetUndo

log = get_logger(__name__)


class SheetEditor:
    """Owns the editing session for one document and applies input events."""

    def __init__(self, state, set_status_cb=None, clipboard=None):
        self.ctx = SheetContext(
            state=state,
            _set_status=set_status_cb or (lambda *_: None),
            clipboard=clipboard if clipboard is not None else ClipboardTransport(),
        )
        self.undo_mgr = SheetUndo(self.ctx)
        self.cell = SheetCell(self.ctx)
        self.nav = SheetNavigation(self.ctx, self.cell)
        self.ops = SheetOps(self.ctx, self.cell, self.undo_mgr)
        self.clip = SheetClipboard(self.ctx, self.undo_mgr)

        self._handlers = {
            ev.Press: lambda e: self.nav.press(e.row, e.col),
            ev.DragTo: lambda e: self.nav.drag_to(e.row, e.col),
            ev.Release: lambda e: self.nav.release(),
            ev.Activate: lambda e: self.cell.begin_edit(e.row, e.col),
            ev.Move: lambda e: self.nav.move(e.d_row, e.d_col, e.extend),
            ev.Confirm: lambda e: self.cell.confirm(),
            ev.Cancel: lambda e: self.cell.cancel(),
            ev.TextInput: lambda e: self.cell.type_text(e.text),
            ev.EditKey: lambda e: self.cell.edit_key(e.name),
            ev.FocusLost: lambda e: self.cell.focus_lost(),
            ev.ClearSelection: lambda e: self.ops.clear_selection(),
            ev.ClearCell: lambda e: self.ops.clear_cell(e.row, e.col),
            ev.Copy: lambda e: self.clip.copy(),
            ev.Cut: lambda e: self.clip.cut(),
            ev.Paste: lambda e: self.clip.paste(e.text),
            ev.SelectAll: lambda e: self.nav.select_all(),
            ev.SelectRow: lambda e: self.nav.select_row(e.row),
            ev.SelectColumn: lambda e: self.nav.select_column(e.col),
            ev.Find: lambda e: self.nav.find(e.query, e.case_sensitive),
            ev.FindNext: lambda e: self.nav.find_next(),
            ev.FindPrev: lambda e: self.nav.find_prev(),
            ev.Undo: lambda e: self.undo_mgr.undo(),
            ev.Redo: lambda e: self.undo_mgr.redo(),
            ev.AddRow: lambda e: self.ops.add_row(),
            ev.AddColumn: lambda e: self.ops.add_column(),
            ev.InsertRow: lambda e: self.ops.insert_row_at(e.at),
            ev.InsertColumn: lambda e: self.ops.insert_column_at(e.at),
            ev.DeleteRow: lambda e: self.ops.delete_row(e.row),
            ev.DeleteColumn: lambda e: self.ops.delete_column(e.col),
            ev.SortColumn: lambda e: self.ops.sort_by_column(e.col, e.ascending),
            ev.ResizeColumn: lambda e: self.ops.resize_column(e.col, e.delta),
            ev.ToggleFrozenHeader: lambda e: self.ops.toggle_frozen_header(),
        }

    # ---------- state access ----------
    @property
    def state(self):
        return self.ctx.state

    @property
    def grid(self):
        return self.ctx.state.grid

    @property
    def selection(self):
        return self.ctx.selection

    @selection.setter
    def selection(self, value):
        self.ctx.selection = value

    @property
    def edit(self):
        return self.ctx.edit

    @property
    def search(self):
        return self.ctx.search

    def cursor(self):
        """Cell the UI should keep in view: the edited cell or the selection end."""
        if self.ctx.edit.active:
            return self.ctx.edit.cell
        sel = self.ctx.selection
        end = getattr(sel, "end", None)
        if end is not None:
            return end
        return sel.anchor()

    # ---------- events ----------
    def handle_event(self, event):
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported input event: {event!r}")
        return handler(event)

    # ---------- document lifecycle ----------
    def new_document(self):
        self.ctx.reset_session()
        self.ctx.state.new_document()
        self.ctx._set_status("New document", 2)

    def load_rows(self, rows, file_path=None, file_handler=None):
        self.ctx.reset_session()
        self.ctx.state.replace_grid(rows, file_path, file_handler)

    def poll_mailbox(self, mailbox) -> bool:
        error = mailbox.take_error()
        if error:
            self.ctx._set_status(error, 4)
            return False
        item = mailbox.take()
        if item is None:
            return False
        data, name = item
        try:
            handler = FileTypeHandler(name)
            rows = parse_bytes(data, name)
        except DocumentError as e:
            # The current document stays as it was.
            log.error("Load of %s failed: %s", name, e)
            self.ctx._set_status(f"Load failed: {e}", 4)
            return False
        self.load_rows(rows, name, handler)
        rows_n, cols_n = self.ctx.state.shape
        log.info("Loaded %s (%dx%d)", name, rows_n, cols_n)
        self.ctx._set_status(f"Loaded {name} ({rows_n}x{cols_n})", 3)
        return True

    def save(self, path=None) -> bool:
        state = self.ctx.state
        try:
            handler = FileTypeHandler(path) if path else state.file_handler
            if handler is None:
                self.ctx._set_status("No file name (use Save as)", 3)
                return False
            handler.save(state.rows_for_save())
        except DocumentError as e:
            log.error("Save failed: %s", e)
            self.ctx._set_status(f"Save failed: {e}", 4)
            return False
        state.file_handler = handler
        state.file_path = handler.path
        state.dirty = False
        self.ctx._set_status(f"Saved {handler.path}", 3)
        return True
