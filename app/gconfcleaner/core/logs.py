"""Logging configuration for the gconf-cleaner CLI.

Library modules only create module level loggers. The CLI calls
``setup_logging()`` once at startup to route records through Rich on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Root logger of the package; every module logger is a child of it.
PACKAGE_LOGGER = "gconfcleaner"


def resolve_log_level(default: str, *, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the effective log level from CLI flags and the configured default.

    Args:
        default: Level name from settings (e.g. "WARNING").
        verbose: --verbose was given; wins over everything.
        quiet: --quiet was given.

    Returns:
        Numeric logging level.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.getLevelNamesMapping().get(default.upper(), logging.WARNING)


def setup_logging(level: int, console: Console | None = None) -> logging.Logger:
    """Attach a single RichHandler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process (tests) do not duplicate output.

    Args:
        level: Numeric logging level.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
