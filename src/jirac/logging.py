"""Logging setup for jirac.

Log records go to stderr through rich so standard output stays free for
the generated comment.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "jirac"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the jirac hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def effective_level(level_name: str, silent: bool = False, stdout_mode: bool = False) -> Optional[int]:
    """Resolve the numeric log level for a run, ``None`` meaning no output."""
    if silent:
        return None
    level = getattr(logging, level_name.upper(), logging.INFO)
    if stdout_mode:
        level = max(level, logging.ERROR)
    return level


def configure_logging(level: Optional[int], console: Optional[Console] = None) -> logging.Logger:
    """Install a single stderr handler on the jirac logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if level is None:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["LEVELS", "configure_logging", "effective_level", "get_logger"]
