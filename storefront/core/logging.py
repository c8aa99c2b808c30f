"""Loguru sink configuration."""
from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "[{time:YYYY-MM-DDTHH:mm:ss.SSS!UTC}Z] <level>{level: <8}</level> "
    "{name}:{function} - <level>{message}</level> {extra}"
)


def configure_logging(level: str = "INFO") -> None:
    """Replace the default loguru sink with the timestamped stderr sink."""

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, backtrace=False)
