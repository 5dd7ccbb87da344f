"""
Console logging setup for the CLI.

The library modules only create named loggers below "timetable"; handlers are
installed here, once, when the CLI starts.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "timetable"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """
    Attach a RichHandler to the "timetable" logger.

    Calling this again only updates the level (no duplicate handlers).
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            show_time=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
