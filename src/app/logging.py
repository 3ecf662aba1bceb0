"""Logging setup for the smart_tags logger tree."""
import logging
from pathlib import Path
from typing import Optional

from src.app.config import get_settings

LOGGER_NAME = "smart_tags"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, log_path: Optional[Path] = None) -> logging.Logger:
    """Configure the root smart_tags logger.

    Level and log file default to Settings.log_level / Settings.log_path.
    Safe to call repeatedly: handlers installed by a previous call are
    replaced rather than stacked.
    """
    if level is None or log_path is None:
        settings = get_settings()
        level = level or settings.log_level
        log_path = log_path or settings.log_path

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
