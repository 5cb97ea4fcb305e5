"""Logging helpers with consistent formatting."""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.logging import RichHandler

from redislock.utils.env import get_str_env


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure and return a logger.

    The level defaults to ``REDISLOCK_LOG_LEVEL`` (``INFO`` when unset), so
    lock acquisitions and releases show up with ``REDISLOCK_LOG_LEVEL=DEBUG``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is None:
        level = get_str_env("REDISLOCK_LOG_LEVEL", default="INFO").upper()
    logger.setLevel(level)

    handler = RichHandler(
        level=level,
        markup=False,
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
