"""
Logging Configuration

Configures logging for catalog extraction.
Output goes to stderr to keep stdout clean for the extraction summary.
Debug output is tagged with the worker thread, since products are
parsed in parallel.
"""

import logging
import sys

LOGGER_NAME = "catalog_parser"

DEFAULT_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
VERBOSE_FORMAT = "%(levelname)-8s [%(threadName)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the catalog_parser logger.

    Args:
        verbose: If True, set level to DEBUG and include thread names
        quiet: If True, set level to WARNING

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else DEFAULT_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
