"""
Logging configuration for transaction processing.
Diagnostics go to stderr; stdout carries the transaction report.
"""
import logging
import os
import sys
from typing import Optional


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or WARNING.

    Returns:
        Configured logger instance
    """
    log_level = level or os.getenv("LOG_LEVEL", "WARNING")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(getattr(logging, log_level.upper()))

        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_level(level: str) -> None:
    """
    Apply a log level to every logger configured by setup_logger.

    Args:
        level: Log level name
    """
    numeric = getattr(logging, level.upper())
    for logger in logging.Logger.manager.loggerDict.values():
        if not isinstance(logger, logging.Logger):
            continue
        if logger.name.split(".")[0] not in ("core", "services", "main", "__main__"):
            continue
        logger.setLevel(numeric)
        for handler in logger.handlers:
            handler.setLevel(numeric)
