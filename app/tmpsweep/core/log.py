"""Logging setup for the command line.

Library modules only create loggers; the CLI decides where records go.
"""

import logging

from rich.logging import RichHandler

from tmpsweep.utils.formatting import err_console

_LOGGER_NAME = "tmpsweep"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route tmpsweep log records to stderr through Rich.

    Calling this again replaces the previously installed handler.

    Args:
        verbose: Emit DEBUG records when True, only WARNING and above otherwise.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
