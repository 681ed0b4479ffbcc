"""Logging setup shared by every pathdoc module.

The library itself only logs at DEBUG: when a write creates a missing parent
mapping and when a write is rejected because a parent is null or not a
mapping. Reads stay silent, so pipelines that look up many optional paths do
not flood the log.

Everything hangs off the ``pathdoc`` logger. It owns the one handler and the
level; module loggers from :func:`get_logger` add nothing and inherit both.
Records still propagate to the Python root logger, which lets host
applications and pytest's ``caplog`` see them.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathdoc"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package logger has its handler; cleared by reset_logging()
_ROOT_LOGGER_CONFIGURED = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Give the ``pathdoc`` logger its handler, level and format.

    Runs automatically on import with INFO level and stdout output. Later calls
    do nothing until :func:`reset_logging` is called, so an application that
    wants its own handler resets first and then calls this.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination for records; defaults to stdout.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = _package_logger()
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pathdoc module.

    Args:
        name: Dotted module name, normally ``__name__``, so the logger sits
            below ``pathdoc`` in the hierarchy.

    Returns:
        Logger with level NOTSET that defers to the package logger.
    """
    setup_root_logger()

    module_logger = logging.getLogger(name)
    module_logger.setLevel(logging.NOTSET)
    return module_logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package logger and of its handlers.

    Args:
        level: New level, e.g. ``logging.DEBUG`` to see parent creation and
            rejected writes.
    """
    setup_root_logger()

    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show auto-created parent mappings and rejected writes."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to INFO, hiding path-level detail."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the package handler so :func:`setup_root_logger` can run again."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
