"""Exception hierarchy for unit-expression parsing and conversion."""

from __future__ import annotations

from typing import Optional


class UcumError(ValueError):
    """Base class for every failure raised by the engine.

    ``position`` is a 0-based character offset into ``text``. When both are
    known the rendered message carries a caret pointer under the offending
    character.
    """

    def __init__(self, message: str, text: str = "", position: int | None = None) -> None:
        pointer = ""
        if text and position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.message = message
        self.text = text
        self.position = position


class ParseError(UcumError):
    """Raised when a unit code cannot be turned into a canonical form."""


class LexError(ParseError):
    """Raised on an unrecognised character or an unterminated bracket/brace."""


class UnitSyntaxError(ParseError):
    """Raised when the token sequence does not follow the unit grammar."""

    def __init__(self, text: str, position: int, expected: str, found: str) -> None:
        super().__init__(f"Expected {expected} but found {found}", text, position)
        self.expected = expected
        self.found = found


class UnknownUnitError(ParseError):
    """Raised when a symbol resolves to no atom, with or without a prefix."""

    def __init__(
        self,
        symbol: str,
        text: str = "",
        position: int | None = None,
        suggestion: Optional[str] = None,
    ) -> None:
        message = f"Unknown unit symbol '{symbol}'"
        if suggestion:
            message += f" (did you mean '{suggestion}'?)"
        super().__init__(message, text, position)
        self.symbol = symbol
        self.suggestion = suggestion


class SemanticError(ParseError):
    """Raised when a well-formed expression violates unit composition rules."""

    def __init__(self, reason: str, text: str = "", position: int | None = None) -> None:
        super().__init__(reason, text, position)
        self.reason = reason


class ConversionError(UcumError):
    """Raised when a value cannot be moved between two units."""


class IncompatibleDimensionsError(ConversionError):
    """Raised when two units do not share a dimension vector."""

    def __init__(
        self,
        code_a: str,
        code_b: str,
        dimension_a: object = None,
        dimension_b: object = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = (
                f"Cannot convert between '{code_a}' and '{code_b}': "
                f"incompatible dimensions {dimension_a} vs {dimension_b}"
            )
        super().__init__(message)
        self.code_a = code_a
        self.code_b = code_b
        self.dimension_a = dimension_a
        self.dimension_b = dimension_b


class ArbitraryUnitMismatchError(IncompatibleDimensionsError):
    """Raised when an arbitrary unit meets anything other than itself."""

    def __init__(
        self,
        code_a: str,
        code_b: str,
        symbol_a: Optional[str],
        symbol_b: Optional[str],
        dimension_a: object = None,
        dimension_b: object = None,
    ) -> None:
        message = (
            f"Cannot convert between '{code_a}' and '{code_b}': arbitrary units are "
            f"only convertible to themselves ({symbol_a or 'non-arbitrary'} vs "
            f"{symbol_b or 'non-arbitrary'})"
        )
        super().__init__(code_a, code_b, dimension_a, dimension_b, message=message)
        self.symbol_a = symbol_a
        self.symbol_b = symbol_b


class RegistryError(UcumError):
    """Raised when the built-in unit table is internally inconsistent."""


__all__ = [
    "UcumError",
    "ParseError",
    "LexError",
    "UnitSyntaxError",
    "UnknownUnitError",
    "SemanticError",
    "ConversionError",
    "IncompatibleDimensionsError",
    "ArbitraryUnitMismatchError",
    "RegistryError",
]
