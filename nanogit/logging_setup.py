"""Logging configuration for command-line use.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module attaches a Rich handler to the package logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "nanogit"


def configure_logging(level: str | int = "INFO", console: Console | None = None) -> logging.Logger:
    """Install a single RichHandler on the ``nanogit`` logger.

    Calling it again replaces the handler rather than stacking another one.
    Log records go to stderr so they never mix with file contents written
    to stdout.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger
