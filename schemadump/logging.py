"""
schemadump Logging Utilities

Simple logging setup using Python's standard logging library.

Diagnostics go to stderr; stdout is reserved for the one-line-per-file
generation report.

Usage:
    from schemadump.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Reading catalog")
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = '[%(asctime)s] %(levelname)-8s | %(name)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str = "schemadump", level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    The logger writes to stderr through its own handler and does not
    propagate, so records are not printed twice once setup_logging has
    configured the root logger. Without a level it follows the root level.

    Args:
        name: Logger name (typically __name__ or module name)
        level: Optional log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logging.Logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    if level is not None:
        logger.setLevel(getattr(logging, level.upper()))

    return logger


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    date_format: Optional[str] = None
):
    """
    Configure logging globally for the whole run.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom log format
        date_format: Custom date format

    Usage:
        setup_logging(level="DEBUG")
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
        stream=sys.stderr,
        force=True  # Reset any existing configuration
    )
