"""Logging setup for the protoweld command line."""

from __future__ import annotations

import logging
import os
from typing import Literal, get_args


LOGGER_NAME = "protoweld"
LOG_LEVEL_ENV = "PROTOWELD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]
LOG_LEVELS: tuple[LogLevel, ...] = get_args(LogLevel)


def default_log_level() -> LogLevel:
    """Level named by ``PROTOWELD_LOG_LEVEL``, or ``warning`` when unset or unknown."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().lower()
    return next((level for level in LOG_LEVELS if level == raw), "warning")


def configure_logging(level: LogLevel) -> logging.Logger:
    """Attach a single stream handler to the ``protoweld`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = [
    "LOGGER_NAME",
    "LOG_LEVELS",
    "LOG_LEVEL_ENV",
    "LogLevel",
    "configure_logging",
    "default_log_level",
]
