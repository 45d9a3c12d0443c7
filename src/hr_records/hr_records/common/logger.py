"""
Logger Module

Provides a centralized logging setup that writes to console and, when
configured, to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

_ROOT_LOGGER_NAME = "hr_records"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Args:
        level: Level name for the package logger, e.g. "DEBUG"
        log_file: Optional path of a log file; parent directories are created

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, just log to console
            logger.warning("Cannot open log file %s: %s", log_path, e)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, e.g. ``get_logger("records.store")``."""
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
