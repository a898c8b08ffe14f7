"""
Logging configuration for the generator and viewer.

Usage:
    from edgewfc.logging_config import setup_logging
    setup_logging()                 # console only
    setup_logging(log_dir)          # console + rotating debug.log in log_dir

All edgewfc.* loggers write WARNING+ to the console and, when a log
directory is given, DEBUG to file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "edgewfc"


def setup_logging(
    log_dir: Optional[Union[Path, str]] = None,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Optional[Path]:
    """
    Configure the edgewfc logger tree. Safe to call more than once; earlier
    handlers are replaced.

    Returns:
        Path to the log file, or None when logging to console only
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(levelname)-8s | %(name)-28s | %(message)s"
    ))
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-28s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    root_logger.info("Logging to %s", log_file.absolute())
    return log_file
