"""Logging setup for generic.

Library modules only create loggers (logging.getLogger(__name__)).
Applications and scripts call setup_logger() once to attach output.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "generic",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        name: Logger name (default: package root logger)
        level: Log level name. Falls back to LOG_LEVEL env var, then INFO.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: Unknown level name.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    numeric_level = logging.getLevelNamesMapping().get(level_name)
    if numeric_level is None:
        raise ValueError(f"unknown log level: {level_name}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Only attach a handler once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.propagate = False

    return logger
