"""
Logging utilities for semrange.

All semrange loggers live under the ``semrange`` namespace. The library
never configures logging on import: until :func:`setup_logging` is called
(normally by the CLI), records go to a ``NullHandler`` and stay silent.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from semrange.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "semrange"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colors.

    Colors are applied to a copy of the level name only for the duration
    of a single ``format`` call, so other handlers sharing the record see
    the plain name.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
        stream: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color
        self.stream = stream

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and color_supported(self.stream)):
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def color_supported(stream: Optional[IO[str]] = None) -> bool:
    """Return True if ANSI colors should be written to ``stream``.

    ``NO_COLOR`` and ``CI`` disable colors; otherwise the stream (default
    ``sys.stderr``) must be a TTY.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    target = stream if stream is not None else sys.stderr
    try:
        return bool(target.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level.

    0 → WARNING, 1 → INFO, 2 or more → DEBUG.
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Install a single stream handler on the ``semrange`` logger.

    Calling this again replaces the previous handler.

    Args:
        level: Logging level (e.g., ``logging.INFO``, ``logging.DEBUG``).
        verbose: Use the verbose format with timestamps and logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    target = stream or sys.stderr
    formatter = ColoredFormatter(
        LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=target,
    )
    handler = logging.StreamHandler(target)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the semrange namespace.

    ``"core.expander"`` and ``"semrange.core.expander"`` name the same
    logger; ``None`` returns the package root logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    return logging.getLogger(qualified)


def is_logging_configured() -> bool:
    """Return True if :func:`setup_logging` has installed a handler."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all semrange logging output."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        root_logger.propagate = True
        _logging_configured = False
