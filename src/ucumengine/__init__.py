"""ucumengine - parsing, validation and conversion of UCUM unit codes."""

from .api import convert, parse, quantity
from .core import ComparisonResult, DimensionVector, Quantity, UnitInfo, UnitKind, ValidationResult
from .diagnostics import display, info, validate
from .errors import (
    ArbitraryUnitMismatchError,
    ConversionError,
    IncompatibleDimensionsError,
    LexError,
    ParseError,
    RegistryError,
    SemanticError,
    UcumError,
    UnitSyntaxError,
    UnknownUnitError,
)
from .parser import parse_expression, tokenize
from .units import add, canonicalize, compare, get_registry, init_registry, is_convertible, subtract

__version__ = "0.1.0"

__all__ = [
    "parse",
    "validate",
    "quantity",
    "convert",
    "is_convertible",
    "add",
    "subtract",
    "compare",
    "display",
    "info",
    "tokenize",
    "parse_expression",
    "canonicalize",
    "get_registry",
    "init_registry",
    "ComparisonResult",
    "DimensionVector",
    "Quantity",
    "UnitInfo",
    "UnitKind",
    "ValidationResult",
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
    "__version__",
]
