"""Quantity-level entry points: parsing literals and converting values."""

from __future__ import annotations

from typing import Optional, Union, overload

from .core.quantity import Quantity
from .diagnostics import display_expression
from .parser.grammar import parse_expression
from .parser.quantity_text import split_quantity_text
from .units.canonical import Canonicalizer
from .units.convert import convert_value


def quantity(value: float, code: str) -> Quantity:
    """Pair ``value`` with ``code``.

    ``code`` must lex and parse; atom lookup and composition checks are left
    to the first conversion that needs them.
    """

    expression = parse_expression(code)
    return Quantity(value, code, expression, display_expression(expression))


def parse(text: str) -> Quantity:
    """Parse ``"<value> <code>"`` (or a bare code) into a :class:`Quantity`.

    Unlike :func:`quantity` the code is fully canonicalized, so unknown
    symbols and illegal compositions raise immediately. Error positions are
    offsets into the code part of ``text``.
    """

    literal = split_quantity_text(text)
    expression = parse_expression(literal.code)
    Canonicalizer().canonicalize(expression)
    return Quantity(literal.value, literal.code, expression, display_expression(expression))


@overload
def convert(value: float, from_code: str, to_code: str) -> float: ...


@overload
def convert(value: Quantity, from_code: str) -> Quantity: ...


def convert(
    value: Union[float, Quantity], from_code: str, to_code: Optional[str] = None
) -> Union[float, Quantity]:
    """Convert a number between two codes, or a :class:`Quantity` into a code.

    ``convert(100, "kg", "[lb_av]")`` returns a float;
    ``convert(quantity(100, "kg"), "[lb_av]")`` returns a new quantity in
    the target unit.
    """

    if isinstance(value, Quantity):
        if to_code is not None:
            raise TypeError("convert(quantity, to_code) takes exactly one unit code")
        target = quantity(0, from_code)
        return target.with_value(convert_value(value.value, value.expression, target.expression))
    if to_code is None:
        raise TypeError("convert(value, from_code, to_code) requires a target unit code")
    return convert_value(value, from_code, to_code)


__all__ = ["quantity", "parse", "convert"]
