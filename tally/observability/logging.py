"""Centralised logging helpers for Tally."""

from __future__ import annotations

import logging
from typing import Dict

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LEVEL_MAP: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = "tally") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""

    return LEVEL_MAP.get((level or "").lower(), logging.INFO)


def configure_logging(level: str) -> logging.Logger:
    """Set the ``tally`` logger level and attach a console handler once."""

    logger = get_logger("tally")
    logger.setLevel(resolve_level(level))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


__all__ = ["LEVEL_MAP", "LOG_FORMAT", "configure_logging", "get_logger", "resolve_level"]
