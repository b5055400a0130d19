import logging

import logger


def test_get_logger_returns_children_of_app_logger():
    assert logger.get_logger().name == "gridpad"
    assert logger.get_logger("sheet_editor").name == "gridpad.sheet_editor"


def test_setup_logging_writes_to_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "_configured", False)
    root = logging.getLogger(logger.ROOT_LOGGER_NAME)
    old_handlers = list(root.handlers)
    log_path = tmp_path / "logs" / "gridpad.log"
    try:
        logger.setup_logging(str(log_path))
        logger.get_logger("test").info("hello from test")
        for handler in root.handlers:
            handler.flush()
        assert "hello from test" in log_path.read_text(encoding="utf-8")
        # second call does not add another handler
        count = len(root.handlers)
        logger.setup_logging(str(log_path))
        assert len(root.handlers) == count
    finally:
        for handler in root.handlers[:]:
            if handler not in old_handlers:
                handler.close()
                root.removeHandler(handler)
