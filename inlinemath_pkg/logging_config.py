"""Logging setup for InlineMath.

The core modules only ever log through ``get_logger``; nothing is emitted
until an application (the CLI, or a host embedding the package) calls
``setup_logging``.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from . import config

ROOT_LOGGER_NAME = "inlinemath"


class StructuredFormatter(logging.Formatter):
    """``<iso-timestamp> [LEVEL] inlinemath.<module>: message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the previous handlers, so the CLI can be
    invoked repeatedly in one process without duplicating output.

    Args:
        level: Level name; unknown names fall back to WARNING. Defaults to
            LOG_LEVEL from config (INLINEMATH_LOG_LEVEL).
        log_file: Extra file to append log lines to

    Returns:
        The ``inlinemath`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = (level or config.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for a package module, e.g. ``get_logger("evaluator")``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
