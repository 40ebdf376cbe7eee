"""Logging setup for rdu."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "rdu"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Send rdu log records to stderr through rich.

    Warnings (skipped files and directories) are always shown; debug output
    only with verbose. Calling this again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    logger.addHandler(handler)
    return logger
