# -*- coding: utf-8 -*-
"""Logging utils."""
import logging
import os
import sys
from typing import Optional

from sudoku_engine.common.constants import LOG_LEVEL_ENV_VAR

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_NAME = "sudoku_engine"


def _get_default_level() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
    # unknown names come back as "Level <name>"
    return level if isinstance(level, int) else logging.INFO


def _get_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(_get_default_level())
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the `sudoku_engine` hierarchy.

    All loggers share one stream handler installed on the package root logger.
    The level comes from `SUDOKU_LOG_LEVEL` (default INFO) unless `level` is given.

    Args:
        name (`str`): Logger name, usually `__name__`. Defaults to the package root.
        level (`str`): Optional level name applied to the returned logger.

    Returns:
        `logging.Logger`: the logger.
    """
    root = _get_root_logger()
    if name is None or name == _ROOT_NAME:
        logger = root
    elif name.startswith(_ROOT_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = root.getChild(name)
    if level is not None:
        logger.setLevel(level.upper())
    return logger


def set_log_level(level: str) -> None:
    """Set the level of every logger in the package."""
    _get_root_logger().setLevel(level.upper())
