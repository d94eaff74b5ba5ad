"""Mini README: Application-wide logging helpers for Pennywise.

Structure:
    * get_logger - module logger factory used across the package.
    * configure_root_logger - attaches the single stream handler once and
      adjusts the level on later calls.
    * resolve_level - turns ``PENNYWISE_LOG_LEVEL`` style names into numbers.

Usage:
    Modules call ``get_logger(__name__)`` at import time, which installs the
    handler at INFO if nobody configured logging yet. Entry points call
    ``configure_root_logger(settings.log_level)`` to pick the real level.
    Reloading modules (uvicorn ``--reload``) never stacks duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``logging`` constants or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Install the Pennywise handler on the root logger and set its level."""

    global _handler
    root_logger = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(_handler)
    root_logger.setLevel(resolve_level(level))
    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, configuring the root logger on first use."""

    if _handler is None:
        configure_root_logger()
    return logging.getLogger(name)
