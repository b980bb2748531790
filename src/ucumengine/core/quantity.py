"""Numeric value paired with the unit expression it is stated in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:  # pragma: no cover
    from ..parser.grammar import Expression


@dataclass(frozen=True)
class Quantity:
    """A value in a parsed, but not canonicalised, unit.

    ``unit`` holds the human-readable name of ``code`` and falls back to the
    code itself when no long name is available.
    """

    value: float
    code: str
    expression: "Expression"
    unit: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Quantity value must be a number, got {type(self.value)}")
        if not self.unit:
            object.__setattr__(self, "unit", self.code)

    def with_value(self, value: float) -> Quantity:
        return Quantity(value, self.code, self.expression, self.unit)

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "code": self.code, "unit": self.unit}

    def __str__(self) -> str:
        return f"{self.value:g} {self.code}"
