"""Non-raising inspection of unit codes: validation, summaries, long names."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple
import logging

from .config import CONTEXT_RADIUS, SUGGESTION_LIMIT
from .core.types import UnitInfo, ValidationIssue, ValidationResult
from .errors import ParseError, UcumError, UnknownUnitError
from .parser.grammar import BinaryOp, Expression, Group, Node, Number, Symbol, Unity, parse_expression
from .units.canonical import Canonicalizer
from .units.registry import UnitRegistry, get_registry

logger = logging.getLogger(__name__)


def _context(text: str, position: Optional[int]) -> str:
    if position is None:
        return text
    start = max(0, position - CONTEXT_RADIUS)
    return text[start : position + CONTEXT_RADIUS + 1]


def _issue(exc: UcumError, text: str) -> ValidationIssue:
    suggestion = exc.suggestion if isinstance(exc, UnknownUnitError) else None
    return ValidationIssue(exc.message, exc.position, _context(text, exc.position), suggestion)


def _iter_annotations(node: Node) -> Iterator[str]:
    annotation = getattr(node, "annotation", None)
    if annotation is not None:
        yield annotation
    if isinstance(node, Group):
        yield from _iter_annotations(node.body)
    elif isinstance(node, BinaryOp):
        yield from _iter_annotations(node.left)
        yield from _iter_annotations(node.right)


def validate(text: str, *, registry: UnitRegistry | None = None) -> ValidationResult:
    """Check ``text`` and report every problem found as data.

    Syntax errors stop the check at the first failure. Once the code parses,
    every unknown symbol is reported with a suggestion; only a code whose
    symbols all resolve goes on to the composition checks.
    """

    code = text if isinstance(text, str) else repr(text)
    result = ValidationResult(valid=True, code=code)
    if not isinstance(text, str):
        result.add_error(ValidationIssue(f"Unit code must be a string, got {type(text).__name__}"))
        return result

    try:
        expression = parse_expression(text)
    except ParseError as exc:
        logger.debug("validate(%r) rejected: %s", text, exc.message)
        result.add_error(_issue(exc, text))
        return result

    if registry is None:
        registry = get_registry()
    for symbol in expression.symbols():
        if registry.resolve(symbol.text) is not None:
            continue
        suggestions = registry.suggest(symbol.text, SUGGESTION_LIMIT)
        exc = UnknownUnitError(
            symbol.text, text, symbol.position, suggestions[0] if suggestions else None
        )
        result.add_error(_issue(exc, text))
    if not result.valid:
        logger.debug("validate(%r) found %d unknown symbol(s)", text, len(result.errors))
        return result

    try:
        Canonicalizer(registry).canonicalize(expression)
    except UcumError as exc:
        logger.debug("validate(%r) rejected: %s", text, exc.message)
        result.add_error(_issue(exc, text))
        return result

    for annotation in _iter_annotations(expression.root):
        result.add_warning(f"Annotation '{{{annotation}}}' is informational and ignored in conversion")
    return result


def info(text: str, *, registry: UnitRegistry | None = None) -> UnitInfo:
    """Summarise the dimension and classification of a valid unit code.

    Raises the underlying :class:`ParseError` when ``text`` is invalid.
    """

    form = Canonicalizer(registry).canonicalize(text)
    return UnitInfo(
        code=text,
        dimension=form.dimension.sparse(),
        type=form.kind,
        magnitude=form.magnitude,
        canonical=form.dimension.decomposition(),
        is_metric=form.is_metric,
        is_special=form.is_special,
        is_arbitrary=form.is_arbitrary,
    )


# -- Long names ----------------------------------------------------------

_POWER_WORDS = {2: "square", 3: "cubic"}


def _flatten(node: Node, power: int, registry: UnitRegistry) -> Optional[List[Tuple[str, int]]]:
    """Return ``(name, exponent)`` pairs for ``node``, or ``None`` if a name is missing."""

    if isinstance(node, Unity):
        return []
    if isinstance(node, Number):
        if node.is_power_of_ten:
            label = f"10^{node.text[3:]}"
        else:
            label = node.text
        return [(label, node.exponent * power)]
    if isinstance(node, Symbol):
        resolved = registry.resolve(node.text)
        if resolved is None or not resolved.name:
            return None
        return [(resolved.name, node.exponent * power)]
    if isinstance(node, Group):
        return _flatten(node.body, power * node.exponent, registry)
    if isinstance(node, BinaryOp):
        left = _flatten(node.left, power, registry)
        right = _flatten(node.right, -power if node.op == "/" else power, registry)
        if left is None or right is None:
            return None
        return left + right
    return None


def _name_with_power(name: str, exponent: int) -> str:
    if exponent == 1:
        return name
    word = _POWER_WORDS.get(exponent)
    if word is not None:
        return f"{word} {name}"
    return f"{name}^{exponent}"


def display(text: str, *, registry: UnitRegistry | None = None) -> str:
    """Return a long name such as ``"milligram per deciliter"``.

    Falls back to ``text`` itself when it does not parse or any symbol lacks
    a long name. Never raises.
    """

    if not isinstance(text, str):
        return repr(text)
    try:
        expression = parse_expression(text)
    except ParseError:
        return text
    return display_expression(expression, registry=registry)


def display_expression(expression: Expression, *, registry: UnitRegistry | None = None) -> str:
    terms = _flatten(expression.root, 1, registry if registry is not None else get_registry())
    if not terms:
        return expression.text

    numerator = [_name_with_power(name, exp) for name, exp in terms if exp > 0]
    denominator = [_name_with_power(name, -exp) for name, exp in terms if exp < 0]
    rendered = " ".join(numerator)
    if denominator:
        rendered = f"{rendered} per {' '.join(denominator)}".strip()
    return rendered or expression.text


__all__ = ["validate", "info", "display", "display_expression"]
