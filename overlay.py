import curses
from typing import List


class HelpOverlay:
    """Full-screen, scrollable list of key bindings."""

    def __init__(self, layout):
        self.layout = layout
        self.visible = False
        self.lines: List[str] = []
        self.scroll = 0
        self.win = None

    def open(self, lines: List[str]):
        self.lines = list(lines or [])
        self.scroll = 0
        self.win = curses.newwin(max(3, self.layout.H), self.layout.W, 0, 0)
        self.win.leaveok(True)
        self.visible = True

    def close(self):
        self.visible = False
        self.lines = []
        self.scroll = 0
        self.win = None

    def handle_key(self, ch):
        if not self.visible or self.win is None or ch == -1:
            return

        h, _ = self.win.getmaxyx()
        content_rows = max(1, h - 2)
        max_scroll = max(0, len(self.lines) - content_rows)

        if ch in (27, ord("q"), 10, 13, curses.KEY_ENTER, curses.KEY_F1):
            self.close()
        elif ch == curses.KEY_DOWN:
            self.scroll = min(max_scroll, self.scroll + 1)
        elif ch == curses.KEY_UP:
            self.scroll = max(0, self.scroll - 1)
        elif ch == curses.KEY_NPAGE:
            self.scroll = min(max_scroll, self.scroll + content_rows)
        elif ch == curses.KEY_PPAGE:
            self.scroll = max(0, self.scroll - content_rows)

    def draw(self):
        if not self.visible or not self.win:
            return

        win = self.win
        win.erase()
        h, w = win.getmaxyx()
        win.box()

        visible = self.lines[self.scroll : self.scroll + max(0, h - 2)]
        for i, line in enumerate(visible):
            try:
                win.addnstr(1 + i, 2, line, max(1, w - 4))
            except curses.error:
                pass
        try:
            win.addnstr(h - 1, 2, " Esc/q to close ", max(1, w - 4))
        except curses.error:
            pass

        win.refresh()
