import curses

MIN_H = 4
MIN_W = 20


class ScreenLayout:
    """Grid window on top, then one status line and one prompt line."""

    STATUS_H = 1
    PROMPT_H = 1

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.resize()

    @property
    def too_small(self) -> bool:
        return self.H < MIN_H or self.W < MIN_W

    def resize(self):
        self.H, self.W = self.stdscr.getmaxyx()
        self.table_h = max(1, self.H - self.STATUS_H - self.PROMPT_H)
        width = max(1, self.W)

        self.table_win = curses.newwin(self.table_h, width, 0, 0)
        self.status_win = curses.newwin(self.STATUS_H, width, self.table_h, 0)
        self.prompt_win = curses.newwin(
            self.PROMPT_H, width, self.table_h + self.STATUS_H, 0
        )
        # only the prompt line ever shows the hardware cursor
        for win in (self.table_win, self.status_win):
            win.leaveok(True)
