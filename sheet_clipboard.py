from clipboard_codec import extract_text, paste_text, split_records


class SheetClipboard:
    """Copy, cut and paste between the selection and the clipboard transport."""

    def __init__(self, ctx, undo_mgr):
        self.ctx = ctx
        self.undo_mgr = undo_mgr

    def copy(self) -> str:
        if self.ctx.edit.active:
            return ""
        text = extract_text(self.ctx.grid, self.ctx.selection)
        if not text:
            return ""
        self.ctx.clipboard.copy(text)
        self.ctx._set_status("Copied", 2)
        return text

    def cut(self) -> str:
        if self.ctx.edit.active:
            return ""
        text = extract_text(self.ctx.grid, self.ctx.selection)
        if not text:
            return ""
        self.undo_mgr.push_undo()
        self.ctx.clipboard.copy(text)
        self.ctx.selection.clear(self.ctx.grid)
        self.ctx._set_status("Cut", 2)
        return text

    def paste(self, text=None):
        if text is None:
            text = self.ctx.clipboard.paste()
        if self.ctx.edit.active:
            # The edit buffer is single-line: only the first record goes in.
            records = split_records(text)
            if records:
                self.ctx.edit.insert("\t".join(records[0]))
            return None
        if not text:
            return None
        self.undo_mgr.push_undo()
        anchor = self.ctx.selection.anchor()
        pasted = paste_text(self.ctx.grid, text, anchor)
        if pasted is not None:
            self.ctx.selection = pasted
            r0, r1, c0, c1 = pasted.normalized()
            self.ctx._set_status(f"Pasted {r1 - r0 + 1}x{c1 - c0 + 1}", 2)
        return pasted
