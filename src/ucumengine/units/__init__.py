"""Unit registry, canonicalization, conversion and quantity arithmetic."""

from .arithmetic import add, compare, subtract
from .canonical import CanonicalForm, Canonicalizer, canonicalize
from .convert import Converter, convert_value, is_convertible
from .registry import Prefix, ResolvedSymbol, UnitAtom, UnitRegistry, get_registry, init_registry

__all__ = [
    "add",
    "compare",
    "subtract",
    "CanonicalForm",
    "Canonicalizer",
    "canonicalize",
    "Converter",
    "convert_value",
    "is_convertible",
    "Prefix",
    "ResolvedSymbol",
    "UnitAtom",
    "UnitRegistry",
    "get_registry",
    "init_registry",
]
