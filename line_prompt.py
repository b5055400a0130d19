import curses
from typing import Callable, Optional


class LinePrompt:
    """One-line text prompt used for Save as, Open and Find."""

    def __init__(self, set_status_cb: Callable[[str, int], None]):
        self._set_status = set_status_cb

        self.active = False
        self.label = ""
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self._on_submit: Optional[Callable[[str], bool]] = None

    def start(self, label: str, initial: Optional[str], on_submit: Callable[[str], bool]):
        self.active = True
        self.label = label
        self.buffer = initial or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0
        self._on_submit = on_submit

    def close(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self._on_submit = None

    def handle_key(self, ch):
        if not self.active:
            return

        if ch in (10, 13, curses.KEY_ENTER):
            text = self.buffer.strip()
            if self._on_submit is None or self._on_submit(text):
                self.close()
            return

        if ch == 27:  # Esc
            self.close()
            self._set_status("Canceled", 2)
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return

        if 32 <= ch <= 126:
            self.buffer = self.buffer[: self.cursor] + chr(ch) + self.buffer[self.cursor :]
            self.cursor += 1
            return

    def draw(self, win):
        prompt = self.label
        h, w = win.getmaxyx()
        text_w = max(1, w - len(prompt) - 1)

        # adjust hscroll
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        start = self.hscroll
        end = start + text_w
        visible = self.buffer[start:end]

        try:
            win.addnstr(0, 0, prompt, len(prompt))
            win.addnstr(0, len(prompt), visible, text_w)
            win.move(0, len(prompt) + (self.cursor - self.hscroll))
        except curses.error:
            pass
        win.refresh()
