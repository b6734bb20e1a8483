"""
Logging configuration and utilities.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class IsoFormatter(logging.Formatter):
    """Formatter that stamps records with an ISO-8601 local timestamp."""

    def formatTime(self, record, datefmt=None):
        stamp = datetime.fromtimestamp(record.created).astimezone()
        return stamp.isoformat(timespec="seconds")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def setup_root_logger(log_file: Optional[Path] = None,
                      level: str = "INFO",
                      format_string: Optional[str] = None,
                      max_bytes: int = 10 * 1024 * 1024,
                      backup_count: int = 5) -> bool:
    """
    Set up the root logger for the application.

    Records always go to stdout. The log file is best-effort: if it cannot be
    opened the failure is reported on the console and file logging is skipped.

    Args:
        log_file: Optional log file path
        level: Logging level
        format_string: Log format string
        max_bytes: Rotate the log file after this many bytes
        backup_count: Number of rotated files to keep

    Returns:
        True if the file handler was attached
    """
    root_logger = logging.getLogger()

    # Clear any existing handlers
    root_logger.handlers.clear()

    root_logger.setLevel(getattr(logging, level.upper()))

    formatter = IsoFormatter(format_string or DEFAULT_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not log_file:
        return False

    # File handler
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
    except OSError as e:
        root_logger.warning(f"Cannot write log file {log_file} ({e}); logging to stdout only")
        return False

    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    return True
