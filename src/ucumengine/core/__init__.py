"""Core value types for the unit engine."""

from .dimensions import (
    AXES,
    BASE_ATOMS,
    DIMENSIONLESS,
    LENGTH,
    MASS,
    TEMPERATURE,
    TIME,
    VOLUME,
    DimensionalError,
    DimensionVector,
)
from .quantity import Quantity
from .types import (
    AtomKind,
    ComparisonResult,
    UnitInfo,
    UnitKind,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "AXES",
    "BASE_ATOMS",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TEMPERATURE",
    "TIME",
    "VOLUME",
    "DimensionalError",
    "DimensionVector",
    "Quantity",
    "AtomKind",
    "ComparisonResult",
    "UnitInfo",
    "UnitKind",
    "ValidationIssue",
    "ValidationResult",
]
