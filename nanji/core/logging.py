"""
Unified Logging Configuration

This module sets up the diagnostic logging used across nanji.
All modules should obtain their logger from here instead of writing to
stderr with print().

Rendered zone listings are primary output and go to stdout. Everything that
goes through these loggers (warnings about skipped zones, errors about the
base time) is diagnostic output and goes to stderr, so the two streams can be
redirected separately.

Usage:
    from nanji.core.logging import get_logger
    logger = get_logger(__name__)

    logger.warning("unknown timezone: 'Mars/Olympus' (skipped)")

Log Levels (from most to least verbose):
    DEBUG    - Detailed diagnostic information (e.g., "Loaded config from ...")
    INFO     - General informational messages
    WARNING  - Degraded output (e.g., a zone name that could not be resolved)
    ERROR    - The command could not run (e.g., malformed base time)
    CRITICAL - Unused

Configuration:
    Log level is controlled by the NANJI_LOG_LEVEL environment variable.
    If not set, defaults to WARNING.
"""

import logging
import sys
from typing import Optional


LOGGER_NAME = "nanji"


def setup_logging(
    log_level: str = "WARNING",
    log_format: Optional[str] = None,
    include_timestamp: bool = False,
    include_module: bool = False
) -> logging.Logger:
    """
    Configure and return the application logger.

    Only the ``nanji`` logger is configured; the root logger is left alone so
    that embedding applications (and pytest's log capture) keep working.
    Calling this again replaces the previous handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include module name in log messages

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.warning("unknown timezone: 'nowhere' (skipped)")
        [WARNING] unknown timezone: 'nowhere' (skipped)
    """
    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s:")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    # Bound to the current stderr so redirected streams are honored
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


# Unconfigured until setup_logging() runs; records still propagate
logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module or component.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Logger instance for the specified name

    Example:
        # In nanji/services/renderer.py:
        logger = get_logger(__name__)  # "nanji.services.renderer"
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_log_level(level: str) -> None:
    """
    Change the log level at runtime.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
