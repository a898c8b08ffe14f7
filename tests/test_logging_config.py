"""Tests for logging setup."""

import logging

from edgewfc.logging_config import LOG_FILE_NAME, ROOT_LOGGER_NAME, setup_logging


def test_console_only_setup_returns_none():
    assert setup_logging() is None
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_file_logging_captures_debug(tmp_path):
    log_file = setup_logging(tmp_path / "logs")
    logging.getLogger("edgewfc.core.solver").debug("probe message")
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        handler.flush()

    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert "probe message" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(tmp_path)
    setup_logging(tmp_path)
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 2
    for handler in list(logging.getLogger(ROOT_LOGGER_NAME).handlers):
        handler.close()
    setup_logging()
