"""Value conversion between compatible unit expressions."""

from __future__ import annotations

from typing import Union
import logging

from ..errors import ArbitraryUnitMismatchError, IncompatibleDimensionsError, UcumError
from ..parser.grammar import Expression
from .canonical import CanonicalForm, Canonicalizer
from .registry import UnitRegistry

logger = logging.getLogger(__name__)

UnitLike = Union[str, Expression]


def _code(unit: UnitLike) -> str:
    return unit if isinstance(unit, str) else getattr(unit, "text", repr(unit))


def ensure_compatible(
    source: CanonicalForm, target: CanonicalForm, source_code: str, target_code: str
) -> None:
    """Raise unless ``source`` and ``target`` describe the same kind of quantity."""

    if source.is_compatible(target):
        return
    if source.is_arbitrary or target.is_arbitrary:
        raise ArbitraryUnitMismatchError(
            source_code,
            target_code,
            source.arbitrary_symbol,
            target.arbitrary_symbol,
            source.dimension,
            target.dimension,
        )
    raise IncompatibleDimensionsError(
        source_code, target_code, source.dimension, target.dimension
    )


def convert_canonical(value: float, source: CanonicalForm, target: CanonicalForm) -> float:
    """Move ``value`` from ``source`` to ``target``; both must be compatible.

    Proportional pairs reduce to a single ratio. When either side is
    special, the value is first taken to the canonical base (through the
    source's ``to_base`` when special) and then out again (through the
    target's ``from_base`` when special).
    """

    if source == target:
        return value
    if source.special is None and target.special is None:
        return value * source.magnitude / target.magnitude

    if source.special is not None:
        base = source.special.special.to_base(value) * source.magnitude
    else:
        base = value * source.magnitude

    if target.special is not None:
        return target.special.special.from_base(base / target.magnitude)
    return base / target.magnitude


class Converter:
    """Conversion bound to one registry."""

    def __init__(self, registry: UnitRegistry | None = None) -> None:
        self._canonicalizer = Canonicalizer(registry)

    def is_convertible(self, source: UnitLike, target: UnitLike) -> bool:
        try:
            left = self._canonicalizer.canonicalize(source)
            right = self._canonicalizer.canonicalize(target)
        except (UcumError, TypeError) as exc:
            logger.debug("is_convertible(%r, %r) failed: %s", _code(source), _code(target), exc)
            return False
        return left.is_compatible(right)

    def convert(self, value: float, source: UnitLike, target: UnitLike) -> float:
        left = self._canonicalizer.canonicalize(source)
        right = self._canonicalizer.canonicalize(target)
        ensure_compatible(left, right, _code(source), _code(target))
        return convert_canonical(value, left, right)


def is_convertible(source: UnitLike, target: UnitLike) -> bool:
    """Return whether a value in ``source`` can be expressed in ``target``.

    Never raises: any parse or lookup failure yields ``False``.
    """

    return Converter().is_convertible(source, target)


def convert_value(value: float, source: UnitLike, target: UnitLike) -> float:
    return Converter().convert(value, source, target)


__all__ = [
    "Converter",
    "convert_canonical",
    "convert_value",
    "ensure_compatible",
    "is_convertible",
]
