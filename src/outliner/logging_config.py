"""Logging configuration for the outline editor."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    ``verbose`` logs every command and cursor move; ``quiet`` keeps only
    warnings and errors (used by the stdio MCP server).
    """
    logger.remove()
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}", diagnose=verbose)
