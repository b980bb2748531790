"""Read-only catalog of unit atoms and prefixes."""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
import os
import threading

from ..core.dimensions import DimensionVector
from ..core.types import AtomKind
from .specials import SpecialFunction


@dataclass(frozen=True)
class Prefix:
    symbol: str
    name: str
    factor: float


@dataclass(frozen=True)
class UnitAtom:
    """A registry entry.

    ``factor`` and ``dimension`` give the atom's canonical magnitude relative
    to the base atoms. For special atoms they describe the reference unit
    that ``special`` maps into; for arbitrary atoms they are placeholders.
    """

    symbol: str
    name: str
    property: str
    kind: AtomKind
    factor: float
    dimension: DimensionVector
    is_metric: bool
    special: Optional[SpecialFunction] = None

    @property
    def is_special(self) -> bool:
        return self.kind is AtomKind.SPECIAL

    @property
    def is_arbitrary(self) -> bool:
        return self.kind is AtomKind.ARBITRARY


@dataclass(frozen=True)
class ResolvedSymbol:
    """A written symbol split into its optional prefix and atom."""

    prefix: Optional[Prefix]
    atom: UnitAtom

    @property
    def factor(self) -> float:
        scale = self.prefix.factor if self.prefix is not None else 1.0
        return scale * self.atom.factor

    @property
    def name(self) -> str:
        if not self.atom.name:
            return ""
        return f"{self.prefix.name if self.prefix is not None else ''}{self.atom.name}"


class UnitRegistry:
    """Immutable mapping from symbols to atoms and prefixes.

    The registry only answers lookups. Whether a prefix may legally combine
    with an atom is left to the canonicalizer; :meth:`resolve` reports the
    split as written.
    """

    def __init__(self, atoms: Mapping[str, UnitAtom], prefixes: Mapping[str, Prefix]) -> None:
        self._atoms: Mapping[str, UnitAtom] = MappingProxyType(atoms)
        self._prefixes: Mapping[str, Prefix] = MappingProxyType(prefixes)
        self._sorted_prefixes: Tuple[str, ...] = tuple(
            sorted(self._prefixes.keys(), key=len, reverse=True)
        )

    # ------------------------------------------------------------------
    @property
    def atoms(self) -> Mapping[str, UnitAtom]:
        return self._atoms

    @property
    def prefixes(self) -> Mapping[str, Prefix]:
        return self._prefixes

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._atoms

    def __len__(self) -> int:
        return len(self._atoms)

    def get_atom(self, symbol: str) -> Optional[UnitAtom]:
        return self._atoms.get(symbol)

    def get_prefix(self, symbol: str) -> Optional[Prefix]:
        return self._prefixes.get(symbol)

    def resolve(self, symbol: str) -> Optional[ResolvedSymbol]:
        """Split ``symbol`` into ``prefix? atom``.

        An exact atom match wins. Otherwise the longest prefix whose
        remainder is an atom is used, preferring a metric remainder when
        several splits exist.
        """

        atom = self._atoms.get(symbol)
        if atom is not None:
            return ResolvedSymbol(None, atom)

        fallback: Optional[ResolvedSymbol] = None
        for prefix_symbol in self._sorted_prefixes:
            if not symbol.startswith(prefix_symbol) or len(symbol) == len(prefix_symbol):
                continue
            tail = self._atoms.get(symbol[len(prefix_symbol) :])
            if tail is None:
                continue
            candidate = ResolvedSymbol(self._prefixes[prefix_symbol], tail)
            if tail.is_metric:
                return candidate
            if fallback is None:
                fallback = candidate
        return fallback

    # -- Classification ---------------------------------------------------
    def is_metric(self, symbol: str) -> bool:
        resolved = self.resolve(symbol)
        return resolved is not None and resolved.atom.is_metric

    def is_special(self, symbol: str) -> bool:
        resolved = self.resolve(symbol)
        return resolved is not None and resolved.atom.is_special

    def is_arbitrary(self, symbol: str) -> bool:
        resolved = self.resolve(symbol)
        return resolved is not None and resolved.atom.is_arbitrary

    # -- Suggestions ------------------------------------------------------
    def _candidates(self) -> List[str]:
        symbols = list(self._atoms.keys())
        for atom in self._atoms.values():
            if atom.is_metric:
                symbols.extend(prefix + atom.symbol for prefix in ("k", "m", "u", "c", "d", "n"))
        return symbols

    def suggest(self, symbol: str, limit: int = 3) -> List[str]:
        """Return up to ``limit`` known symbols closest to ``symbol``.

        Candidates sharing the longest leading text with ``symbol`` come
        first, ignoring case and an opening ``[``. Ties are broken by
        :class:`difflib.SequenceMatcher` ratio on lower-cased text, then on
        the text as written, then by symbol, so the order is stable across
        runs.
        """

        if not symbol or limit <= 0:
            return []
        needle = symbol.lower()
        stem = needle.lstrip("[")
        scored: Dict[str, Tuple[int, float, float, str]] = {}
        for candidate in self._candidates():
            if candidate == symbol or candidate in scored:
                continue
            lowered = candidate.lower()
            ratio = SequenceMatcher(None, needle, lowered).ratio()
            if ratio <= 0:
                continue
            shared = len(os.path.commonprefix([stem, lowered.lstrip("[")]))
            exact = SequenceMatcher(None, symbol, candidate).ratio()
            scored[candidate] = (-shared, -ratio, -exact, candidate)
        ranked = sorted(scored.values())
        return [entry[3] for entry in ranked[:limit]]


_registry: Optional[UnitRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> UnitRegistry:
    """Return the process-wide registry, building it on first use."""

    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _registry is None:
            from .loader import load_default_registry

            _registry = load_default_registry()
        return _registry


def init_registry() -> UnitRegistry:
    """Build the default registry now; later calls are no-ops."""

    return get_registry()


__all__ = [
    "Prefix",
    "UnitAtom",
    "ResolvedSymbol",
    "UnitRegistry",
    "get_registry",
    "init_registry",
]
