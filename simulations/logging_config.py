# simulations/logging_config.py
"""
Logging setup shared by the simulation tools.

Loggers write to stderr so the report printed on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_loggers: dict[str, logging.Logger] = {}
_console_handlers: dict[str, logging.StreamHandler] = {}


def setup_logger(name: str, level: str = "WARNING", format_string: str | None = None) -> logging.Logger:
    """
    Set up a logger with a single console handler.

    Calling again for the same name updates the level and points the console
    handler created here at the current sys.stderr. Handlers attached by
    anything else are left alone.

    :param name: Logger name (a package name or __name__)
    :param level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param format_string: Custom format (DEFAULT_FORMAT if None)
    :return: Configured logger
    """
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    if name in _loggers:
        logger = _loggers[name]
        logger.setLevel(log_level)
        console = _console_handlers.get(name)
        if console is not None:
            console.setLevel(log_level)
            # the old stream may already be closed, so assign instead of setStream()
            console.stream = sys.stderr
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(handler)
        _console_handlers[name] = handler

    _loggers[name] = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Module-level logger. Handlers live on the package loggers configured by
    setup_logger(), so records propagate up to them.
    """
    return _loggers.get(name) or logging.getLogger(name)
