"""Logging configuration for Dictum.

All modules obtain their logger through ``get_logger(__name__)`` so that a
single call to ``setup_logging`` controls the whole package. Log records go
to stderr; stdout is reserved for extraction results.
"""

import logging
import sys

PACKAGE_LOGGER = "dictum"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger.

    Level is DEBUG when ``verbose``, ERROR when ``quiet`` and WARNING
    otherwise. ``verbose`` wins if both flags are set. Calling this again
    replaces the previous handler instead of adding a second one.

    Args:
        verbose: Enable debug output
        quiet: Only report errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_dictum_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._dictum_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
