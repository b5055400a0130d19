import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "gridpad")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "gridpad.log")

# default settings
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None
CLIPBOARD_PASTE_COMMAND_DEFAULT = None
FROZEN_HEADER_DEFAULT = False
UNDO_MAX_DEPTH_DEFAULT = 50
DEFAULT_COLUMN_WIDTH_DEFAULT = 12


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _is_argv(value):
    return (
        isinstance(value, list)
        and bool(value)
        and all(isinstance(item, str) for item in value)
    )


def _is_positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config():
    cfg = {
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
        "CLIPBOARD_PASTE_COMMAND": CLIPBOARD_PASTE_COMMAND_DEFAULT,
        "FROZEN_HEADER": FROZEN_HEADER_DEFAULT,
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "DEFAULT_COLUMN_WIDTH": DEFAULT_COLUMN_WIDTH_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        import json

        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    clip_cmd = data.get("clipboard_interface_command")
    if _is_argv(clip_cmd):
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = clip_cmd
    paste_cmd = data.get("clipboard_paste_command")
    if _is_argv(paste_cmd):
        cfg["CLIPBOARD_PASTE_COMMAND"] = paste_cmd

    frozen = data.get("frozen_header")
    if isinstance(frozen, bool):
        cfg["FROZEN_HEADER"] = frozen

    depth = data.get("undo_max_depth")
    if _is_positive_int(depth):
        cfg["UNDO_MAX_DEPTH"] = depth

    width = data.get("default_column_width")
    if _is_positive_int(width):
        cfg["DEFAULT_COLUMN_WIDTH"] = width

    return cfg
