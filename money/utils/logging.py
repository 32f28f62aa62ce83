"""Logging helpers for the ``money`` package.

Library modules only call ``get_logger(__name__)``. Handlers are attached once
by the host application through ``setup_logging``.
"""

import logging
import sys
from typing import IO

_ROOT_LOGGER = "money"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt: str = _DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again only updates the level, so repeated setup never
    duplicates output.
    """
    global _handler

    logger = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``money`` namespace."""
    if name == _ROOT_LOGGER or name.startswith(f"{_ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
