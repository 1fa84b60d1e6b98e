"""Application-level logging utilities."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated setup reuses them
_HANDLER_NAME = "trend_analyzer.stdout"


def resolve_level(default: int = logging.INFO) -> int:
    """
    Pick the log level from the environment.

    ``DEBUG_TRENDS=true`` wins; otherwise ``TREND_LOG_LEVEL`` may name a
    level (``WARNING``, ``debug``...). Unknown names fall back to ``default``.
    """
    if os.getenv("DEBUG_TRENDS", "false").lower() == "true":
        return logging.DEBUG

    name = os.getenv("TREND_LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logger(name: str = "trend_analyzer", level: Optional[int] = None) -> logging.Logger:
    """Return ``name`` logging to stdout, installing the handler only once."""
    level = resolve_level() if level is None else level
    logger = logging.getLogger(name)

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(level)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(module: str) -> logging.Logger:
    """Child of the application logger, e.g. ``trend_analyzer.query``."""
    short = module.rsplit(".", 1)[-1]
    return LOGGER.getChild(short)


LOGGER: logging.Logger = setup_logger()

__all__ = ["LOGGER", "get_logger", "resolve_level", "setup_logger"]
