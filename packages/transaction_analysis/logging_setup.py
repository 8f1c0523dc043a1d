"""Centralized logging configuration for ``transaction_analysis``.

Two helpers:

- ``configure_logging(...)``: attach one ``StreamHandler`` to the package
  logger (``"transaction_analysis"``). Entry points (the CLI) call it once at
  startup; further calls are no-ops unless ``force=True``.
- ``get_logger(name)``: return a logger, making sure the package logger has a
  ``NullHandler`` until an application configures it.

Library modules never attach handlers of their own.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import log_level_setting

PACKAGE_LOGGER = "transaction_analysis"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def parse_level(level: int | str | None, default: int = logging.WARNING) -> int:
    """Resolve ``level`` (int, numeric string or level name) to an int.

    ``None`` falls back to ``TRANSACTION_ANALYSIS_LOG_LEVEL`` and then to
    ``default``. Unknown names raise ``ValueError``.
    """

    if level is None:
        level = log_level_setting()
        if level is None:
            return default
    if isinstance(level, bool):
        raise ValueError(f"Invalid log level: {level!r}")
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelNamesMapping().get(name)
    if numeric is None:
        raise ValueError(f"Invalid log level: {level!r}")
    return numeric


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level:
        Level as ``int`` or name. ``None`` reads
        ``TRANSACTION_ANALYSIS_LOG_LEVEL`` and defaults to ``WARNING`` so the
        report on stdout is not interleaved with chatter.
    fmt:
        Format string; defaults to :data:`DEFAULT_FORMAT`.
    stream:
        Destination of the handler; ``sys.stderr`` when omitted.
    force:
        Replace a previously installed handler instead of keeping it.
    """

    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None and not force:
        return logger

    resolved = parse_level(level)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h is _handler:
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _handler = handler
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger; silent until :func:`configure_logging` runs."""

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "parse_level", "PACKAGE_LOGGER"]
