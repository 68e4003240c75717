"""Logging helpers for botboard.

All loggers live under the ``botboard`` namespace, so logging for the whole
package can be controlled through the root ``botboard`` logger. Nothing is
emitted unless the application configures logging, or calls
``log_to_stderr`` for a quick look at what a board is doing::

    from botboard.board_logging import DEBUG, log_to_stderr

    log_to_stderr(DEBUG)
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO, WARNING

__all__ = [
    "DEBUG",
    "INFO",
    "WARNING",
    "create_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

BOTBOARD_LOGGER_NAME = "botboard"
DEFAULT_LOGGING_FORMAT = "[%(levelname)s/%(name)s] %(message)s"

logging.getLogger(BOTBOARD_LOGGER_NAME).addHandler(logging.NullHandler())


def _qualify(name: str) -> str:
    if name == BOTBOARD_LOGGER_NAME or name.startswith(f"{BOTBOARD_LOGGER_NAME}."):
        return name
    return f"{BOTBOARD_LOGGER_NAME}.{name}"


def get_rootlogger() -> logging.Logger:
    """Return the root logger of the botboard namespace."""
    return logging.getLogger(BOTBOARD_LOGGER_NAME)


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a logger for the calling module.

    Args:
        name: name of the logger, defaults to the name of the calling module

    Returns:
        a logger inside the botboard namespace
    """
    if name is None:
        frame = inspect.stack()[1]
        module = inspect.getmodule(frame[0])
        if module is None:
            raise ValueError("Cannot determine the calling module, pass a name explicitly")
        name = module.__name__
    return logging.getLogger(_qualify(name))


def method_logger(name: str):
    """Decorator that logs every call to a method at DEBUG level.

    Args:
        name: name of the module the method lives in, typically ``__name__``
    """
    logger = logging.getLogger(_qualify(name))

    def real_decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            logger.debug(
                f"calling {type(self).__name__}.{func.__name__} with {args} and {kwargs}"
            )
            return func(self, *args, **kwargs)

        return wrapper

    return real_decorator


def log_to_stderr(level: int | None = None, pass_root_logger_level: bool = False):
    """Attach a stderr handler to the botboard root logger.

    Args:
        level: logging level to set on the botboard root logger
        pass_root_logger_level: if True, records also propagate to the
            python root logger
    """
    logger = get_rootlogger()
    if level is not None:
        logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_LOGGING_FORMAT))
    logger.addHandler(handler)
    logger.propagate = pass_root_logger_level
    return handler
