import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(payload=None):
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "gridpad"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        if payload is not None:
            cfg_path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
        # point module paths to temp
        orig_dir = config_paths.CONFIG_DIR
        orig_json = config_paths.CONFIG_JSON
        try:
            config_paths.CONFIG_DIR = str(cfg_dir)
            config_paths.CONFIG_JSON = str(cfg_path)
            return config_paths.load_config()
        finally:
            config_paths.CONFIG_DIR = orig_dir
            config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    cfg = _load_with()
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] is None
    assert cfg["CLIPBOARD_PASTE_COMMAND"] is None
    assert cfg["FROZEN_HEADER"] is False
    assert cfg["UNDO_MAX_DEPTH"] == 50
    assert cfg["DEFAULT_COLUMN_WIDTH"] == 12


def test_load_config_reads_json_overrides():
    cfg = _load_with(
        {
            "clipboard_interface_command": ["wl-copy"],
            "clipboard_paste_command": ["wl-paste", "-n"],
            "frozen_header": True,
            "undo_max_depth": 10,
            "default_column_width": 20,
        }
    )
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] == ["wl-copy"]
    assert cfg["CLIPBOARD_PASTE_COMMAND"] == ["wl-paste", "-n"]
    assert cfg["FROZEN_HEADER"] is True
    assert cfg["UNDO_MAX_DEPTH"] == 10
    assert cfg["DEFAULT_COLUMN_WIDTH"] == 20


def test_invalid_values_fall_back_to_defaults():
    cfg = _load_with(
        {
            "clipboard_interface_command": "wl-copy",
            "frozen_header": "yes",
            "undo_max_depth": 0,
            "default_column_width": True,
        }
    )
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] is None
    assert cfg["FROZEN_HEADER"] is False
    assert cfg["UNDO_MAX_DEPTH"] == 50
    assert cfg["DEFAULT_COLUMN_WIDTH"] == 12


def test_malformed_json_uses_defaults():
    cfg = _load_with("{not json")
    assert cfg["UNDO_MAX_DEPTH"] == 50
