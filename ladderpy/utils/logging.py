"""Logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru for command-line use.

    Removes the default handler, re-enables the package logger and logs to
    stderr so stdout stays free for the ladder itself.

    Args:
        verbose: Log progress messages (INFO)
        debug: Log per-round search details (DEBUG); implies verbose
    """
    logger.remove()
    logger.enable("ladderpy")

    if debug:
        level = "DEBUG"
        log_format = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
    elif verbose:
        level = "INFO"
        log_format = "{message}"
    else:
        level = "WARNING"
        log_format = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=log_format, colorize=None)
