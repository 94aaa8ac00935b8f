"""
Logging configuration helpers.
The API factory and the maintenance scripts call this once at startup so every module
can simply use `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str = "INFO") -> None:
    """Configure process-wide logging at the given level name."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
