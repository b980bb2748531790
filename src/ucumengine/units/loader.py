"""Build the default :class:`UnitRegistry` from the static unit table."""

from __future__ import annotations

from typing import Dict, Iterable
import logging

from ..core.dimensions import DIMENSIONLESS, DimensionalError, DimensionVector
from ..core.types import AtomKind
from ..errors import RegistryError, UcumError
from ..observability import log_event
from .atoms import (
    BASE_UNITS,
    PREFIXES,
    UNITS,
    ArbitraryRow,
    AtomRow,
    Row,
    SpecialRow,
)
from .canonical import CanonicalForm, Canonicalizer
from .registry import Prefix, UnitAtom, UnitRegistry
from .specials import special_function

logger = logging.getLogger(__name__)


def _reference(canonicalizer: Canonicalizer, row: Row, unit: str) -> CanonicalForm:
    try:
        form = canonicalizer.canonicalize(unit)
    except UcumError as exc:
        raise RegistryError(
            f"Definition of '{row.symbol}' refers to invalid unit '{unit}': {exc.message}"
        ) from exc
    if form.is_special or form.is_arbitrary:
        raise RegistryError(f"Definition of '{row.symbol}' must reference a proportional unit")
    return form


def build_registry(
    prefixes: Iterable = PREFIXES,
    base_units: Iterable = BASE_UNITS,
    units: Iterable[Row] = UNITS,
) -> UnitRegistry:
    """Resolve every row into a :class:`UnitAtom`.

    Rows are processed in order against a staging registry, so a definition
    may use any atom declared before it. Duplicate symbols and unresolvable
    definitions raise :class:`RegistryError`.
    """

    prefix_map: Dict[str, Prefix] = {}
    for row in prefixes:
        if row.symbol in prefix_map:
            raise RegistryError(f"Duplicate prefix '{row.symbol}'")
        prefix_map[row.symbol] = Prefix(row.symbol, row.name, float(row.factor))

    atoms: Dict[str, UnitAtom] = {}
    staging = UnitRegistry(atoms, prefix_map)
    canonicalizer = Canonicalizer(staging)

    def install(atom: UnitAtom) -> None:
        if atom.symbol in atoms:
            raise RegistryError(f"Duplicate unit symbol '{atom.symbol}'")
        atoms[atom.symbol] = atom

    for row in base_units:
        try:
            dimension = DimensionVector.axis(row.axis)
        except DimensionalError as exc:
            raise RegistryError(f"Base unit '{row.symbol}' names unknown axis '{row.axis}'") from exc
        install(UnitAtom(row.symbol, row.name, row.property, AtomKind.BASE, 1.0, dimension, True))

    for row in units:
        if isinstance(row, AtomRow):
            form = _reference(canonicalizer, row, row.unit)
            install(
                UnitAtom(
                    row.symbol,
                    row.name,
                    row.property,
                    AtomKind.PROPORTIONAL,
                    float(row.value) * form.magnitude,
                    form.dimension,
                    bool(row.metric),
                )
            )
        elif isinstance(row, SpecialRow):
            form = _reference(canonicalizer, row, row.unit)
            install(
                UnitAtom(
                    row.symbol,
                    row.name,
                    row.property,
                    AtomKind.SPECIAL,
                    float(row.value) * form.magnitude,
                    form.dimension,
                    False,
                    special=special_function(row.function),
                )
            )
        elif isinstance(row, ArbitraryRow):
            install(
                UnitAtom(
                    row.symbol,
                    row.name,
                    row.property,
                    AtomKind.ARBITRARY,
                    1.0,
                    DIMENSIONLESS,
                    False,
                )
            )
        else:
            raise RegistryError(f"Unsupported unit row {row!r}")

    return UnitRegistry(dict(atoms), prefix_map)


def load_default_registry() -> UnitRegistry:
    registry = build_registry()
    logger.debug("Loaded %d unit atoms and %d prefixes", len(registry), len(registry.prefixes))
    log_event("ucum.registry.loaded", atoms=len(registry), prefixes=len(registry.prefixes))
    return registry


__all__ = ["build_registry", "load_default_registry"]
