"""Logging utility."""
import logging
import os
import sys
from typing import Optional


def _level_from_env() -> int:
    """Resolve the log level from LOG_LEVEL, defaulting to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)

    if level is None:
        level = _level_from_env()

    logger.setLevel(level)

    # Console handler, attached once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)

    return logger


# Default logger instance
logger = setup_logger("studyforge")
