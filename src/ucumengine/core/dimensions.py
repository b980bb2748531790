"""Dimension vectors over the seven UCUM base quantities.

UCUM does not use the SI base set. Its seven axes are length (``m``), time
(``s``), mass (``g``), plane angle (``rad``), temperature (``K``), electric
charge (``C``) and luminous intensity (``cd``); the mole is a dimensionless
count and the ampere is derived as ``C/s``. :class:`DimensionVector` models a
unit's shape as integer exponents over these axes and is closed under
multiplication, division and integer exponentiation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


class DimensionalError(Exception):
    """Raised when a dimensional operation is invalid."""


AXES: Tuple[str, ...] = (
    "length",
    "time",
    "mass",
    "angle",
    "temperature",
    "charge",
    "luminosity",
)

AXIS_SYMBOLS: Tuple[str, ...] = ("L", "T", "M", "A", "C", "Q", "F")

BASE_ATOMS: Tuple[str, ...] = ("m", "s", "g", "rad", "K", "C", "cd")


@dataclass(frozen=True)
class DimensionVector:
    """Integer exponents in the order ``(L, T, M, A, C, Q, F)``."""

    length: int = 0
    time: int = 0
    mass: int = 0
    angle: int = 0
    temperature: int = 0
    charge: int = 0
    luminosity: int = 0

    def __post_init__(self) -> None:
        """Ensure all exponents are integers."""
        for field in AXES:
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool):
                raise DimensionalError(
                    f"Dimension exponent {field} must be an integer, got {type(value)}"
                )

    # -- Core algebra -----------------------------------------------------
    def __mul__(self, other: DimensionVector) -> DimensionVector:
        """Multiply two units by adding their exponent vectors."""
        if not isinstance(other, DimensionVector):
            raise TypeError(f"Cannot multiply DimensionVector by {type(other)}")

        return DimensionVector(*[a + b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __truediv__(self, other: DimensionVector) -> DimensionVector:
        """Divide two units by subtracting exponent vectors."""
        if not isinstance(other, DimensionVector):
            raise TypeError(f"Cannot divide DimensionVector by {type(other)}")

        return DimensionVector(*[a - b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __pow__(self, exponent: int) -> DimensionVector:
        """Raise the unit to an integer power."""
        if not isinstance(exponent, int):
            raise TypeError(f"Dimension exponent must be integer, got {type(exponent)}")

        return DimensionVector(*[value * exponent for value in self.as_tuple()])

    # -- Helpers ----------------------------------------------------------
    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, field) for field in AXES)

    @classmethod
    def from_tuple(cls, values: Tuple[int, ...]) -> DimensionVector:
        if len(values) != len(AXES):
            raise DimensionalError(f"Expected {len(AXES)} exponents, got {len(values)}")
        return cls(*values)

    @classmethod
    def axis(cls, name: str) -> DimensionVector:
        """Return the unit vector along axis ``name``."""
        if name not in AXES:
            raise DimensionalError(f"Unknown dimension axis '{name}'")
        return cls(**{name: 1})

    def is_dimensionless(self) -> bool:
        """Return ``True`` when all exponents are zero."""
        return all(value == 0 for value in self.as_tuple())

    def sparse(self) -> Dict[str, int]:
        """Return the non-zero exponents keyed by axis name."""
        return {name: value for name, value in zip(AXES, self.as_tuple()) if value != 0}

    def decomposition(self) -> list[Tuple[str, int]]:
        """Return ``(base atom, exponent)`` pairs in axis order, zeros omitted."""
        return [(atom, value) for atom, value in zip(BASE_ATOMS, self.as_tuple()) if value != 0]

    def __str__(self) -> str:
        if self.is_dimensionless():
            return "dimensionless"

        parts = []
        for symbol, power in zip(AXIS_SYMBOLS, self.as_tuple()):
            if power == 0:
                continue
            if power == 1:
                parts.append(symbol)
            else:
                parts.append(f"{symbol}^{power}")

        return " * ".join(parts)


DIMENSIONLESS = DimensionVector()
LENGTH = DimensionVector(length=1)
TIME = DimensionVector(time=1)
MASS = DimensionVector(mass=1)
ANGLE = DimensionVector(angle=1)
TEMPERATURE = DimensionVector(temperature=1)
CHARGE = DimensionVector(charge=1)
LUMINOSITY = DimensionVector(luminosity=1)

VOLUME = LENGTH**3
VELOCITY = LENGTH / TIME
FORCE = MASS * LENGTH / (TIME**2)
ENERGY = FORCE * LENGTH
PRESSURE = FORCE / (LENGTH**2)
CURRENT = CHARGE / TIME
