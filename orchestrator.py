# ~/Apps/gridpad/orchestrator.py
import curses
import os
import time

import input_events as ev
from grid_pane import GridPane
from key_bindings import HELP_LINES, translate_key
from line_prompt import LinePrompt
from load_mailbox import LoadMailbox, start_background_read
from logger import get_logger
from overlay import HelpOverlay
from screen_layout import ScreenLayout
from sheet_editor import SheetEditor
from status_bar import render_status

log = get_logger(__name__)

CTRL_F = 6
CTRL_N = 14
CTRL_O = 15
CTRL_Q = 17
CTRL_S = 19

_MOUSE_MASK = curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION


class Orchestrator:
    def __init__(self, stdscr, app_state, clipboard=None, mailbox=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)
        try:
            curses.mousemask(_MOUSE_MASK)
            curses.mouseinterval(0)
        except curses.error:
            pass

        self.state = app_state
        self.mailbox = mailbox if mailbox is not None else LoadMailbox()
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.overlay = HelpOverlay(self.layout)
        self.prompt = LinePrompt(self._set_status)

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.editor = SheetEditor(self.state, self._set_status, clipboard)

        self._mouse_down = False
        self._pending_confirm = None
        self.exit_requested = False

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "editing": self.editor.edit.active,
            "dirty": self.state.dirty,
            "file_path": self.state.file_path,
            "shape": self.state.shape,
            "cursor": self.editor.cursor(),
            "sort_marker": self.state.sort_marker,
            "frozen_header": self.state.frozen_header,
            "matches": len(self.editor.search.results),
        }

    def _confirm_discard(self, action):
        """Ask twice before dropping unsaved changes; True once confirmed."""
        if not self.state.dirty or self._pending_confirm == action:
            self._pending_confirm = None
            return True
        self._pending_confirm = action
        self._set_status(f"Unsaved changes; press again to {action}", 4)
        return False

    def _rebuild_layout(self):
        curses.update_lines_cols()
        self.layout.resize()
        if self.overlay.visible:
            self.overlay.open(self.overlay.lines)
        self.stdscr.clear()
        self.stdscr.refresh()

    # ---------------- UI ----------------

    def redraw(self):
        if self.layout.too_small:
            self.stdscr.erase()
            try:
                self.stdscr.addnstr(0, 0, "Terminal too small", max(1, self.layout.W - 1))
            except curses.error:
                pass
            self.stdscr.refresh()
            return

        if self.overlay.visible:
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self.overlay.draw()
            return

        try:
            curses.curs_set(1 if self.prompt.active else 0)
        except curses.error:
            pass

        self.grid.draw(self.layout.table_win, self.editor)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(self._status_context(), w), w, curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

        pw = self.layout.prompt_win
        pw.erase()
        if self.prompt.active:
            self.prompt.draw(pw)
        else:
            pw.refresh()

    # ---------------- documents ----------------

    def _save(self):
        # Commit the in-flight edit before writing.
        self.editor.handle_event(ev.FocusLost())
        if self.state.file_handler is None:
            self.prompt.start("Save as: ", self.state.file_path, self._save_as)
            return False
        return self.editor.save()

    def _save_as(self, path):
        if not path:
            self._set_status("File name required", 3)
            return False
        return self.editor.save(os.path.expanduser(path))

    def _open(self, path):
        if not path:
            self._set_status("File name required", 3)
            return False
        self.editor.handle_event(ev.FocusLost())
        start_background_read(os.path.expanduser(path), self.mailbox)
        self._set_status(f"Loading {path}...", 10)
        return True

    def _find(self, query):
        # smart-case: an upper-case letter makes the search case sensitive
        case_sensitive = any(ch.isupper() for ch in query)
        self.editor.handle_event(ev.Find(query, case_sensitive))
        return True

    # ---------------- input ----------------

    def _handle_mouse(self):
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            return
        top, left = self.layout.table_win.getbegyx()
        hit = self.grid.cell_at(y - top, x - left)

        if bstate & curses.BUTTON1_RELEASED:
            if self._mouse_down:
                self.editor.handle_event(ev.Release())
            self._mouse_down = False
            return
        if hit is None:
            return

        kind = hit[0]
        if bstate & curses.BUTTON1_DOUBLE_CLICKED and kind == "cell":
            self.editor.handle_event(ev.Activate(hit[1], hit[2]))
        elif bstate & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
            if kind == "row":
                self.editor.handle_event(ev.SelectRow(hit[1]))
            elif kind == "col":
                self.editor.handle_event(ev.SelectColumn(hit[1]))
            else:
                self.editor.handle_event(ev.Press(hit[1], hit[2]))
                self._mouse_down = bool(bstate & curses.BUTTON1_PRESSED)
                if bstate & curses.BUTTON1_CLICKED:
                    self.editor.handle_event(ev.Release())
        elif bstate & curses.REPORT_MOUSE_POSITION and self._mouse_down:
            if kind == "cell":
                self.editor.handle_event(ev.DragTo(hit[1], hit[2]))

    def handle_key(self, ch):
        if ch == CTRL_Q:
            self.editor.handle_event(ev.FocusLost())
            if self._confirm_discard("quit"):
                self.exit_requested = True
            return
        if ch == CTRL_N:
            if self._confirm_discard("discard"):
                self.editor.new_document()
            return
        self._pending_confirm = None

        if ch == curses.KEY_MOUSE:
            self._handle_mouse()
            return
        if ch == curses.KEY_F1:
            self.overlay.open(HELP_LINES)
            return
        if ch == CTRL_S:
            self._save()
            return
        if ch == CTRL_O:
            self.prompt.start("Open: ", None, self._open)
            return
        if ch == CTRL_F:
            self.prompt.start("Find: ", self.editor.search.query, self._find)
            return

        editing = self.editor.edit.active
        cursor = self.editor.cursor() or (0, 0)
        event = translate_key(ch, editing, cursor)
        if event is not None:
            self.editor.handle_event(event)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            self.editor.poll_mailbox(self.mailbox)

            if ch == curses.KEY_RESIZE:
                self._rebuild_layout()
            elif ch == -1:
                pass
            elif self.overlay.visible:
                self.overlay.handle_key(ch)
            elif self.prompt.active:
                self.prompt.handle_key(ch)
            else:
                self.handle_key(ch)

            self.redraw()

            if self.exit_requested:
                log.info("Exiting")
                break
