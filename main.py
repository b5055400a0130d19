import sys
import os
import curses
import logging

from clipboard import ClipboardTransport
from config_paths import LOG_PATH, ensure_config_dirs, load_config
from file_type_handler import FileTypeHandler, UnsupportedFileType
from load_mailbox import LoadMailbox, start_background_read
from logger import get_logger, setup_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

USAGE = (
    "gridpad - terminal spreadsheet-style table editor\n\n"
    "Usage:\n  gridpad [path]\n  gridpad -d [path]\n  gridpad -v\n"
)

log = get_logger(__name__)


def _parse_args(args):
    """Return (action, path, debug) where action is run, help, version or error."""
    debug = False
    paths = []
    for arg in args:
        if arg in ("-v", "-V"):
            return "version", None, debug
        if arg == "-h":
            return "help", None, debug
        if arg == "-d":
            debug = True
        elif arg.startswith("-"):
            return "error", arg, debug
        else:
            paths.append(arg)
    if len(paths) > 1:
        return "error", paths[1], debug
    return "run", (paths[0] if paths else None), debug


def main():
    action, path, debug = _parse_args(sys.argv[1:])

    if action == "version":
        print(__version__)
        return 0
    if action == "help":
        print(USAGE)
        return 0
    if action == "error":
        print(f"Unexpected argument: {path}\n\n{USAGE}", file=sys.stderr)
        return 2

    ensure_config_dirs()
    setup_logging(LOG_PATH, logging.DEBUG if debug else logging.INFO)
    cfg = load_config()

    handler = None
    if path:
        try:
            handler = FileTypeHandler(path)
        except UnsupportedFileType as e:
            print(e, file=sys.stderr)
            return 1

    state = AppState.from_config(cfg, None, path, handler)
    clipboard = ClipboardTransport(
        cfg["CLIPBOARD_INTERFACE_COMMAND"], cfg["CLIPBOARD_PASTE_COMMAND"]
    )
    mailbox = LoadMailbox()
    if handler is not None and handler.exists() and os.path.getsize(path) > 0:
        start_background_read(path, mailbox)

    log.info("Starting gridpad %s (%s)", __version__, path or "new document")

    def curses_main(stdscr):
        Orchestrator(stdscr, state, clipboard, mailbox).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
