"""Splitting of human-entered ``"<value> <code>"`` quantity literals."""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..errors import UnitSyntaxError


_QUANTITY_RE = re.compile(
    r"""
    ^\s*
    (?P<value>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    \s+
    (?P<code>\S+)
    \s*$
    """,
    re.VERBOSE,
)


@dataclass(slots=True)
class QuantityText:
    """Result of :func:`split_quantity_text`.

    Attributes
    ----------
    value:
        Numeric part of the literal, ``1.0`` when only a code was given.
    code:
        The unit code with surrounding whitespace removed.
    offset:
        Index of the first character of ``code`` inside the original text.
    """

    value: float
    code: str
    offset: int


def split_quantity_text(text: str) -> QuantityText:
    """Split ``text`` into a numeric value and a unit code.

    A bare code such as ``"mg/dL"`` is read as one of that unit. Whitespace
    is only meaningful as the separator between the value and the code, so
    any other whitespace is left in the code for the lexer to reject.
    """

    if not isinstance(text, str):
        raise TypeError(f"Quantity text must be a string, got {type(text)}")

    match = _QUANTITY_RE.match(text)
    if match:
        return QuantityText(float(match.group("value")), match.group("code"), match.start("code"))

    stripped = text.strip()
    if not stripped:
        raise UnitSyntaxError(text, 0, "a unit code", "empty expression")
    return QuantityText(1.0, stripped, text.index(stripped))


__all__ = ["QuantityText", "split_quantity_text"]
