"""Logging utilities for srap."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

# Global logger instance (singleton)
_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get or create the srap logger."""
    global _logger
    if _logger is None:
        _logger = _setup_logger()
    return _logger


def _setup_logger() -> logging.Logger:
    """Setup logging.

    By default, does not log anywhere; user-facing messages go to stdout
    through the console instead.
    Set SRAP_LOG_FILE environment variable to enable file logging.
    - Set to a file path to log to that specific file.
    - Set to "1", "true", "yes", or "on" to log to the default logs directory.
    """
    logger = logging.getLogger("srap")
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    log_env = os.environ.get("SRAP_LOG_FILE")

    if not log_env:
        logger.addHandler(logging.NullHandler())
        return logger

    log_path: Path

    if log_env.lower() in ("1", "true", "yes", "on"):
        logs_dir = Path.cwd() / "logs"
        log_path = logs_dir / f"srap_{datetime.now().strftime('%Y-%m-%d')}.log"
    else:
        log_path = Path(log_env)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)
    except OSError as e:
        # Fallback to stderr if file logging fails
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.WARNING)
        stream_handler.setFormatter(logging.Formatter(f"Failed to setup log file: {e} | %(message)s"))
        logger.addHandler(stream_handler)

    return logger
