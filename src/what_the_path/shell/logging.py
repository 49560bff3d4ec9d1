"""Logging for what-the-path.

Library code only asks for the package logger; handlers are attached by
configure_logging(), which the MCP server calls on startup.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "what_the_path"
LOG_FILE_ENV = "WHAT_THE_PATH_LOG_FILE"

_FLAG_VALUES = ("1", "true", "yes", "on")


def get_logger() -> logging.Logger:
    """Get the package logger."""
    return logging.getLogger(LOGGER_NAME)


def _log_file_path(value: str) -> Path:
    """Map the WHAT_THE_PATH_LOG_FILE value to a log file path.

    A flag value selects ./logs/what_the_path_<date>.log, anything else is
    taken as the path itself.
    """
    if value.lower() in _FLAG_VALUES:
        return Path.cwd() / "logs" / f"what_the_path_{datetime.now().strftime('%Y-%m-%d')}.log"
    return Path(value).expanduser()


def configure_logging(log_file: Optional[str] = None) -> logging.Logger:
    """Attach a file handler to the package logger if file logging is enabled.

    Args:
        log_file: Log file path or flag value. Defaults to the
            WHAT_THE_PATH_LOG_FILE environment variable. Nothing is
            configured when both are empty.

    Returns:
        The package logger. Calling this again does not add handlers.
    """
    logger = get_logger()
    if logger.handlers:
        return logger

    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV)
    if not log_file:
        return logger

    logger.setLevel(logging.DEBUG)
    try:
        log_path = _log_file_path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
    except OSError as e:
        # Log to stderr rather than fail the caller
        handler = logging.StreamHandler()
        reason = str(e).replace("%", "%%")
        handler.setFormatter(logging.Formatter(f"Cannot write log file ({reason}) | %(message)s"))

    logger.addHandler(handler)
    return logger
