"""
Logging configuration for Boilerplater.

Every module obtains its logger through :func:`get_logger`. Handlers are
installed once, by :func:`setup_logging`, usually from the CLI entry point.
User-facing output never goes through logging; see ``messages.Messenger``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "boilerplater"
DEFAULT_FORMAT = "%(message)s"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        level: Logging level (name or number).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``. Configuration happens in setup_logging()."""
    return logging.getLogger(name)
