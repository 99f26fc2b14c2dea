"""
Structured JSON logging for langsplit.

Log records go to stderr as one JSON object per line, so they never mix with
the report written to stdout.
"""

import json
import logging
import os
import sys
from typing import Any

ROOT_LOGGER_NAME = "langsplit"
LOG_LEVEL_ENV = "LANGSPLIT_LOG_LEVEL"


class JSONFormatter(logging.Formatter):
    """
    Formatter that renders each record as a JSON object.

    Fields: timestamp, level, logger, message, plus "context" when the record
    was logged with extra={"context": {...}} and "exception" when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _default_level() -> int:
    """Resolve the default level from LANGSPLIT_LOG_LEVEL (WARNING if unset or unknown)."""
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Get or create a structured JSON logger.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: from LANGSPLIT_LOG_LEVEL, else WARNING)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already exists
    if logger.handlers:
        return logger

    if level is None:
        level = _default_level()

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def set_log_level(level: int) -> None:
    """
    Change the level of every langsplit logger created so far.

    Args:
        level: New logging level (e.g. logging.DEBUG for --verbose)
    """
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
