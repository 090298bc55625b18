"""Logging setup using loguru."""

import sys

from loguru import logger

from fluentext.utils.constants import Constants


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for fluentext output.

    The package disables its own log records on import. Calling this turns
    them back on and replaces any existing sinks with a single stderr sink.

    Args:
        verbose: Emit INFO and above
        debug: Emit DEBUG and above (takes precedence over verbose)
    """
    logger.remove()
    logger.enable(Constants.LOGGER_NAME)

    if debug:
        level = "DEBUG"
        log_format = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"
    elif verbose:
        level = "INFO"
        log_format = "{message}"
    else:
        level = "WARNING"
        log_format = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=log_format, colorize=None)
