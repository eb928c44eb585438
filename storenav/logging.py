"""Logging setup shared by every storenav module.

All package loggers hang below the ``storenav`` logger, which owns the single
stdout handler. Modules call ``get_logger(__name__)`` and never attach
handlers of their own; the CLI picks the level from its flags.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "storenav"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``storenav`` logger once.

    Later calls do nothing until ``reset_logging()``.

    Args:
        level: Initial level of the package logger.
        format_string: Record format; defaults to time, logger, level, message.
        handler: Handler to install; defaults to a stdout StreamHandler.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog listens on the real root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that follows the ``storenav`` level."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` flags to a log level.

    ``--verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures (tests only)."""
    global _configured
    _configured = False

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
