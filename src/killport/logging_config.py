"""
Logging configuration for the killport command.

All log output goes to stderr so stdout carries only the discovery summary
and kill confirmations. Warnings use a plain message format; when a debug
level is requested the technical format with timestamps and logger names is
used instead.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = __name__.rpartition(".")[0]

_config_lock = threading.Lock()
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_TECHNICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_USER_FRIENDLY_FORMAT = "%(message)s"


def _build_console_handler(level: int, stream: TextIO) -> logging.Handler:
    if level <= logging.DEBUG:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _TECHNICAL_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_USER_FRIENDLY_FORMAT)

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation
            logging.getLogger(__name__).debug("Handler close failed: %s", exc)
        logger.removeHandler(handler)


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger, replacing any previous one."""

    with _config_lock:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        _close_handlers(package_logger)
        package_logger.addHandler(_build_console_handler(level, stream if stream is not None else sys.stderr))
        package_logger.setLevel(level)
        package_logger.propagate = False
        return package_logger


__all__ = ["PACKAGE_LOGGER_NAME", "setup_logging"]
