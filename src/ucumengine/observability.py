"""Logging helpers for the unit engine."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

logger = logging.getLogger(__name__)


def log_event(message: str, **extra: object) -> None:
    """Log a structured event; fields travel in the record's ``payload``."""

    logger.info(message, extra={"payload": dict(extra)})


def configure_logging(level: str | int | None = None) -> None:
    """Install a console handler for the command-line entry point."""

    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(level=resolved, format="[%(levelname)s] %(message)s")


__all__ = ["log_event", "configure_logging"]
