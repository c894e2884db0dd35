"""Console logging with level indicators for build progress output."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "sitenav"

# Between INFO (20) and WARNING (30).
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LEVEL_MARKERS = {
    "DEBUG": "·",
    "WARNING": "⚠️ ",
    "ERROR": "❌",
    "CRITICAL": "🔥",
    "SUCCESS": "✅",
}


class MarkerFormatter(logging.Formatter):
    """Prefix non-INFO records with a short level marker."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        marker = LEVEL_MARKERS.get(record.levelname)
        if marker is None:
            return message
        return f"{marker} {message}"


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Calling again replaces the previous handler so repeated CLI invocations
    (tests) do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(MarkerFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def log_success(logger: logging.Logger, message: str, *args: object) -> None:
    """Log ``message`` at the SUCCESS level."""
    logger.log(SUCCESS, message, *args)


__all__ = [
    "LOGGER_NAME",
    "SUCCESS",
    "MarkerFormatter",
    "configure_logging",
    "log_success",
]
