"""File logging setup; log lines never go to the interactive terminal."""

from __future__ import annotations

import logging
from pathlib import Path

from foodcourt.config import LOG_LEVEL, LOG_PATH

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(path: str | Path = LOG_PATH, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a file handler to the package logger, replacing any previous one."""
    logger_ = logging.getLogger("foodcourt")
    if logger_.hasHandlers():
        logger_.handlers.clear()

    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger_.addHandler(handler)
    logger_.setLevel(level)
    logger_.propagate = False
    return logger_
