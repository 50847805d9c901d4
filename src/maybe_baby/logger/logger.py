"""Logging for the maybe_baby package.

The package logger only carries a ``NullHandler`` and propagates to the
application's handlers, so importing the package prints nothing. Scripts that
want console output opt in through ``setup_logger``.
"""

import logging
import sys
import typing as tp

from maybe_baby.core.config import settings

__all__ = ["logger", "setup_logger", "PACKAGE_LOGGER", "CONSOLE_HANDLER"]

PACKAGE_LOGGER = "maybe_baby"
CONSOLE_HANDLER = "maybe_baby.console"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(target: logging.Logger) -> tp.Optional[logging.Handler]:
    for handler in target.handlers:
        if handler.get_name() == CONSOLE_HANDLER:
            return handler
    return None


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Attach a console handler to a logger and set its level.

    Calling it again for the same name keeps the first handler and level.

    Args:
        name: Logger name, ``maybe_baby`` or one of its children
        level: Log level name; defaults to ``settings.LOG_LEVEL``
        format_string: Custom format string
        stream: Output stream; defaults to ``sys.stdout``

    Returns:
        The configured logger
    """
    target = logging.getLogger(name)
    if _console_handler(target) is not None:
        return target

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(CONSOLE_HANDLER)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    target.addHandler(handler)
    target.setLevel((level or settings.LOG_LEVEL).upper())
    return target


logger = logging.getLogger(PACKAGE_LOGGER)
logger.addHandler(logging.NullHandler())
