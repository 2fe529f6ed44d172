"""Logging setup for the cemdoc CLI and service."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "cemdoc"
_CONSOLE_FORMAT = "[cemdoc] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``cemdoc.<name>``, or the package logger when no name is given."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send cemdoc records to stderr and, when ``log_file`` is set, to that file.

    Rendering details such as skipped tables are logged at DEBUG and only
    appear with ``verbose``.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [_handler(logging.StreamHandler(), _CONSOLE_FORMAT, level)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_handler(logging.FileHandler(log_file, encoding="utf-8"), _FILE_FORMAT, level))
    for handler in handlers:
        logger.addHandler(handler)
    return logger


def _handler(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


__all__ = ["configure_logging", "get_logger"]
