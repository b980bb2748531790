"""Reduction of parsed unit expressions to canonical (magnitude, dimension) form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union
import math

from ..config import SUGGESTION_LIMIT
from ..core.dimensions import DIMENSIONLESS, DimensionVector
from ..core.types import AtomKind, UnitKind
from ..errors import SemanticError, UnknownUnitError
from ..parser.grammar import (
    BinaryOp,
    Expression,
    Group,
    Node,
    Number,
    Symbol,
    Unity,
    parse_expression,
)
from .registry import UnitAtom, UnitRegistry, get_registry


@dataclass(frozen=True)
class CanonicalForm:
    """A unit reduced to the base atoms.

    A plain form is ``magnitude × base units``. A special form keeps the
    special atom so its function pair can be applied during conversion;
    ``magnitude`` is then the canonical magnitude of the atom's reference
    unit. An arbitrary form is identified by its atom alone.
    """

    magnitude: float
    dimension: DimensionVector
    is_metric: bool = True
    special: Optional[UnitAtom] = None
    arbitrary: Optional[UnitAtom] = None

    @property
    def is_special(self) -> bool:
        return self.special is not None

    @property
    def is_arbitrary(self) -> bool:
        return self.arbitrary is not None

    @property
    def arbitrary_symbol(self) -> Optional[str]:
        return self.arbitrary.symbol if self.arbitrary is not None else None

    @property
    def kind(self) -> UnitKind:
        if self.special is not None:
            return UnitKind.SPECIAL
        if self.arbitrary is not None:
            return UnitKind.ARBITRARY
        return UnitKind.METRIC if self.is_metric else UnitKind.NON_METRIC

    def is_compatible(self, other: CanonicalForm) -> bool:
        """Arbitrary units match only themselves; all others compare dimensions."""
        if self.is_arbitrary or other.is_arbitrary:
            return self.arbitrary_symbol == other.arbitrary_symbol
        return self.dimension == other.dimension

    # -- Algebra over plain forms ----------------------------------------
    def __mul__(self, other: CanonicalForm) -> CanonicalForm:
        return CanonicalForm(
            self.magnitude * other.magnitude,
            self.dimension * other.dimension,
            self.is_metric and other.is_metric,
        )

    def __truediv__(self, other: CanonicalForm) -> CanonicalForm:
        return CanonicalForm(
            self.magnitude / other.magnitude,
            self.dimension / other.dimension,
            self.is_metric and other.is_metric,
        )

    def __pow__(self, exponent: int) -> CanonicalForm:
        if exponent == 1:
            return self
        return CanonicalForm(
            self.magnitude**exponent,
            self.dimension**exponent,
            self.is_metric,
        )


UNITY = CanonicalForm(1.0, DIMENSIONLESS)


def _in_range(build: Callable[[], CanonicalForm], text: str, position: int) -> CanonicalForm:
    """Run ``build``, rejecting magnitudes a float cannot hold."""
    try:
        form = build()
    except (OverflowError, ZeroDivisionError):
        form = None
    if form is None or form.magnitude == 0 or not math.isfinite(form.magnitude):
        raise SemanticError("Unit magnitude out of range", text, position)
    return form


class Canonicalizer:
    """Evaluates an expression tree against a :class:`UnitRegistry`."""

    def __init__(self, registry: UnitRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> UnitRegistry:
        return self._registry if self._registry is not None else get_registry()

    def canonicalize(self, unit: Union[str, Expression]) -> CanonicalForm:
        expression = parse_expression(unit) if isinstance(unit, str) else unit
        return self._evaluate(expression.root, expression.text, solitary=True)

    def _evaluate(self, node: Node, text: str, solitary: bool) -> CanonicalForm:
        if isinstance(node, Unity):
            return UNITY
        if isinstance(node, Number):
            if node.value == 0 and not node.is_power_of_ten:
                raise SemanticError("A numeric unit factor may not be zero", text, node.position)
            return _in_range(
                lambda: CanonicalForm(float(node.value), DIMENSIONLESS) ** node.exponent,
                text,
                node.position,
            )
        if isinstance(node, Symbol):
            return self._evaluate_symbol(node, text, solitary)
        if isinstance(node, Group):
            inner = self._evaluate(node.body, text, solitary and node.exponent == 1)
            if inner.is_special or inner.is_arbitrary:
                return inner
            return _in_range(lambda: inner**node.exponent, text, node.position)
        if isinstance(node, BinaryOp):
            left = self._evaluate(node.left, text, solitary=False)
            right = self._evaluate(node.right, text, solitary=False)
            if node.op == ".":
                return _in_range(lambda: left * right, text, node.position)
            return _in_range(lambda: left / right, text, node.position)
        raise TypeError(f"Unexpected expression node {type(node).__name__}")

    def _evaluate_symbol(self, node: Symbol, text: str, solitary: bool) -> CanonicalForm:
        registry = self.registry
        resolved = registry.resolve(node.text)
        if resolved is None:
            suggestions = registry.suggest(node.text, SUGGESTION_LIMIT)
            raise UnknownUnitError(
                node.text,
                text,
                node.position,
                suggestions[0] if suggestions else None,
            )

        atom = resolved.atom
        prefix = resolved.prefix
        if atom.kind is AtomKind.BASE or atom.kind is AtomKind.PROPORTIONAL:
            if prefix is not None and not atom.is_metric:
                raise SemanticError(
                    f"Prefix '{prefix.symbol}' may not be applied to non-metric unit '{atom.symbol}'",
                    text,
                    node.position,
                )
            factor = resolved.factor
            return _in_range(
                lambda: CanonicalForm(factor, atom.dimension, atom.is_metric) ** node.exponent,
                text,
                node.position,
            )

        if atom.kind is AtomKind.SPECIAL:
            label = "special"
        elif atom.kind is AtomKind.ARBITRARY:
            label = "arbitrary"
        else:  # pragma: no cover - AtomKind is closed
            raise TypeError(f"Unhandled atom kind {atom.kind!r}")

        if prefix is not None:
            raise SemanticError(
                f"Prefix '{prefix.symbol}' may not be applied to {label} unit '{atom.symbol}'",
                text,
                node.position,
            )
        if node.exponent != 1:
            raise SemanticError(
                f"The {label} unit '{atom.symbol}' may not carry an exponent",
                text,
                node.position,
            )
        if not solitary:
            raise SemanticError(
                f"The {label} unit '{atom.symbol}' may not be composed with other units",
                text,
                node.position,
            )
        if atom.kind is AtomKind.SPECIAL:
            return CanonicalForm(atom.factor, atom.dimension, False, special=atom)
        return CanonicalForm(1.0, atom.dimension, False, arbitrary=atom)


def canonicalize(
    unit: Union[str, Expression], *, registry: UnitRegistry | None = None
) -> CanonicalForm:
    """Reduce ``unit`` to its :class:`CanonicalForm`, raising on any violation."""

    return Canonicalizer(registry).canonicalize(unit)


__all__ = ["CanonicalForm", "Canonicalizer", "UNITY", "canonicalize"]
