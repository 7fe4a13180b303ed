"""Logging configuration for the Users API."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure the root handler and return the package logger.

    Repeated calls only adjust the level; handlers installed by the hosting
    process (uvicorn, pytest) are left untouched.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger("users_api")
    logger.setLevel(level)
    return logger


__all__ = ["setup_logging"]
