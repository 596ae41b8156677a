"""Structured logging configuration for polyeq.

All loggers hang off the "polyeq" root logger:

- polyeq.scanner     WARNING when a line or a number literal is rejected
- polyeq.recognizer  DEBUG trace of each recognition attempt and where an
                     equation prefix stopped short of the end of the line
- polyeq.api         INFO when require_equation rejects a line
- polyeq.cli         DEBUG line-by-line results of the interactive loop

The CLI calls setup_logging once from --log-level/--log-file; library users
who never call it get only the logging module's last-resort WARNING output.
"""

import logging
import sys
from datetime import datetime
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(
    level: str = "INFO", log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs (if None, logs to stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("polyeq")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "polyeq") -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name such as "scanner" or "recognizer"

    Returns:
        Logger instance
    """
    return logging.getLogger(f"polyeq.{name}")
