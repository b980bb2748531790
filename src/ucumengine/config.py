"""Environment-driven settings for the unit engine."""

from __future__ import annotations

from typing import Tuple
import os


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        return default


SUGGESTION_LIMIT = _env_int("UCUM_SUGGESTION_LIMIT", 3)
CONTEXT_RADIUS = _env_int("UCUM_CONTEXT_RADIUS", 4)
LOG_LEVEL = os.getenv("UCUM_LOG_LEVEL", "WARNING").upper()


def compare_tolerances() -> Tuple[float, float]:
    """Return ``(rel_tol, abs_tol)`` for :func:`compare`, read on every call.

    Both default to zero, which makes equality exact.
    """

    return (
        _env_float("UCUM_COMPARE_REL_TOL", 0.0),
        _env_float("UCUM_COMPARE_ABS_TOL", 0.0),
    )


__all__ = ["SUGGESTION_LIMIT", "CONTEXT_RADIUS", "LOG_LEVEL", "compare_tolerances"]
