"""Addition, subtraction and ordering of quantities.

The left operand's unit is authoritative: ``b`` is converted into ``a``'s
unit before the numbers are combined, and results are stated in ``a.code``.
"""

from __future__ import annotations

from typing import Optional
import logging
import math

from ..config import compare_tolerances
from ..core.quantity import Quantity
from ..core.types import ComparisonResult
from ..errors import IncompatibleDimensionsError, UcumError
from .canonical import Canonicalizer
from .convert import convert_canonical, ensure_compatible

logger = logging.getLogger(__name__)


def _converted_operand(a: Quantity, b: Quantity) -> float:
    """Return ``b.value`` expressed in ``a``'s unit."""

    canonicalizer = Canonicalizer()
    try:
        target = canonicalizer.canonicalize(a.expression)
        source = canonicalizer.canonicalize(b.expression)
    except UcumError as exc:
        raise IncompatibleDimensionsError(
            b.code,
            a.code,
            message=f"Cannot convert between '{b.code}' and '{a.code}': {exc.message}",
        ) from exc
    ensure_compatible(source, target, b.code, a.code)
    return convert_canonical(b.value, source, target)


def add(a: Quantity, b: Quantity) -> Quantity:
    """Return ``a + b`` in ``a``'s unit."""

    return a.with_value(a.value + _converted_operand(a, b))


def subtract(a: Quantity, b: Quantity) -> Quantity:
    """Return ``a - b`` in ``a``'s unit."""

    return a.with_value(a.value - _converted_operand(a, b))


def compare(
    a: Quantity,
    b: Quantity,
    *,
    rel_tol: Optional[float] = None,
    abs_tol: Optional[float] = None,
) -> ComparisonResult:
    """Order ``a`` against ``b`` after converting ``b`` into ``a``'s unit.

    Incompatible operands are reported through ``convertible=False`` rather
    than raised. Equality is exact unless a tolerance is configured through
    the environment or passed here.
    """

    try:
        converted = _converted_operand(a, b)
    except IncompatibleDimensionsError as exc:
        logger.debug("compare(%s, %s) not comparable: %s", a, b, exc.message)
        return ComparisonResult(0, False, a, b)

    default_rel, default_abs = compare_tolerances()
    rel = default_rel if rel_tol is None else rel_tol
    tol = default_abs if abs_tol is None else abs_tol
    if rel > 0 or tol > 0:
        equal = math.isclose(a.value, converted, rel_tol=rel, abs_tol=tol)
    else:
        equal = a.value == converted

    if equal:
        comparison = 0
    elif a.value > converted:
        comparison = 1
    else:
        comparison = -1
    return ComparisonResult(comparison, True, a, b, converted)


__all__ = ["add", "subtract", "compare"]
