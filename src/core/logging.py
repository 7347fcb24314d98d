"""Logging setup (stdlib logging rendered through Rich).

Diagnostics go to stderr so they never interleave with the interactive
menu on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "todo_d2"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger or one of its children."""

    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Install a single Rich handler on the application logger.

    Calling it again replaces the previous handler instead of stacking them.
    """

    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
