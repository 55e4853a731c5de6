"""
Logging setup for the CLIs and scripts.

Library modules only ever call logging.getLogger(__name__); handlers are
installed here, once, by whatever entry point is running.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "wordle_analyzer"

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to the package logger.

    Args:
        level:    console level name or number (e.g. "INFO")
        log_file: if given, every INFO+ record is also appended to this file

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # handlers do the filtering

    # Prevent duplicate handlers when called twice (tests, notebooks)
    if logger.handlers:
        logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(fh)

    return logger
