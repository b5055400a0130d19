"""Shared logging configuration for gridpad."""

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "gridpad"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a child of it for a module name."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(log_path: str | None, level: int = logging.INFO) -> logging.Logger:
    """Route application logs to `log_path`.

    The terminal belongs to curses while the editor runs, so nothing is sent
    to a stream handler. Calling this more than once is harmless.
    """
    global _configured

    root = get_logger()
    if _configured:
        return root

    root.setLevel(level)
    root.propagate = False
    try:
        if log_path:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_path, encoding="utf-8")
        else:
            handler = logging.NullHandler()
    except OSError as e:
        print(f"Failed to set up logging: {e}")
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
    return root
