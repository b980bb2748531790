"""Tests for the unit registry and its loader."""

import threading

import pytest

from ucumengine.core.dimensions import DIMENSIONLESS, LENGTH, MASS
from ucumengine.core.types import AtomKind
from ucumengine.errors import RegistryError
from ucumengine.units import get_registry, init_registry
from ucumengine.units.atoms import AtomRow, ArbitraryRow, BaseRow, PrefixRow, SpecialRow
from ucumengine.units.loader import build_registry


@pytest.fixture(scope="module")
def registry():
    return get_registry()


def test_registry_is_built_once():
    assert init_registry() is get_registry()


def test_concurrent_first_use_returns_one_registry():
    seen = []

    def worker():
        seen.append(get_registry())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(item is seen[0] for item in seen)


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry.atoms["zz"] = None  # type: ignore[index]


def test_base_atoms(registry):
    meter = registry.get_atom("m")
    assert meter.kind is AtomKind.BASE
    assert meter.dimension == LENGTH
    assert meter.factor == 1.0


def test_derived_atom_factors(registry):
    assert registry.get_atom("N").factor == pytest.approx(1000.0)
    assert registry.get_atom("[lb_av]").factor == pytest.approx(453.59237)
    assert registry.get_atom("[lb_av]").dimension == MASS
    assert registry.get_atom("mol").dimension == DIMENSIONLESS
    assert registry.get_atom("mol").factor == pytest.approx(6.0221367e23)


def test_resolve_exact_before_prefix(registry):
    resolved = registry.resolve("cd")
    assert resolved.prefix is None
    assert resolved.atom.symbol == "cd"

    resolved = registry.resolve("Pa")
    assert resolved.prefix is None


def test_resolve_prefixed_symbols(registry):
    resolved = registry.resolve("mmol")
    assert resolved.prefix.symbol == "m"
    assert resolved.atom.symbol == "mol"
    assert resolved.name == "millimole"

    assert registry.resolve("dL").factor == pytest.approx(1e-4)
    assert registry.resolve("mm[Hg]").atom.symbol == "m[Hg]"
    assert registry.resolve("daL").prefix.symbol == "da"


def test_resolve_reports_prefix_on_non_metric(registry):
    resolved = registry.resolve("k[lb_av]")
    assert resolved is not None
    assert resolved.prefix.symbol == "k"
    assert not resolved.atom.is_metric


def test_resolve_unknown(registry):
    assert registry.resolve("invalid_unit") is None
    assert registry.resolve("k") is None


def test_classification_queries(registry):
    assert registry.is_metric("kg")
    assert not registry.is_metric("[in_i]")
    assert registry.is_special("Cel")
    assert registry.is_special("[degF]")
    assert registry.is_arbitrary("[IU]")
    assert not registry.is_arbitrary("mg")
    assert not registry.is_special("nope")


def test_special_atoms_carry_function_pairs(registry):
    celsius = registry.get_atom("Cel")
    assert celsius.kind is AtomKind.SPECIAL
    assert celsius.special.to_base(0) == pytest.approx(273.15)
    assert celsius.special.from_base(273.15) == pytest.approx(0)


def test_suggestions_are_ranked_and_stable(registry):
    suggestions = registry.suggest("mgg")
    assert suggestions
    assert suggestions == registry.suggest("mgg")
    assert len(suggestions) <= 3
    assert "mg" in registry.suggest("mgg", limit=10)


def test_suggestions_for_bracketed_atom(registry):
    assert registry.suggest("[lb_a]")[0] == "[lb_av]"


def test_suggestions_prefer_shared_leading_text(registry):
    assert registry.suggest("mgg")[0] == "mg"
    assert registry.suggest("invalid_unit")[0] == "[in_i]"
    assert registry.suggest("[lbf_a]", 2) == ["[lbf_av]", "[lb_av]"]


def test_suggest_limits(registry):
    assert registry.suggest("", 3) == []
    assert registry.suggest("mg", 0) == []


def test_loader_rejects_forward_reference():
    with pytest.raises(RegistryError, match="'x'"):
        build_registry(
            prefixes=(),
            base_units=(BaseRow("m", "meter", "length", "length"),),
            units=(AtomRow("x", "x", "length", 2, "y", False), AtomRow("y", "y", "length", 1, "m", False)),
        )


def test_loader_rejects_duplicates():
    with pytest.raises(RegistryError, match="Duplicate"):
        build_registry(
            prefixes=(PrefixRow("k", "kilo", 1e3), PrefixRow("k", "kilo", 1e3)),
            base_units=(),
            units=(),
        )
    with pytest.raises(RegistryError, match="Duplicate"):
        build_registry(
            prefixes=(),
            base_units=(BaseRow("m", "meter", "length", "length"),),
            units=(AtomRow("m", "meter", "length", 1, "m", True),),
        )


def test_loader_rejects_unknown_axis_and_function():
    with pytest.raises(RegistryError):
        build_registry(prefixes=(), base_units=(BaseRow("mol", "mole", "amount", "amount"),), units=())
    with pytest.raises(RegistryError):
        build_registry(
            prefixes=(),
            base_units=(BaseRow("K", "kelvin", "temperature", "temperature"),),
            units=(SpecialRow("X", "x", "temperature", "nope", 1, "K"),),
        )


def test_loader_rejects_definition_over_arbitrary_unit():
    with pytest.raises(RegistryError, match="proportional"):
        build_registry(
            prefixes=(),
            base_units=(),
            units=(ArbitraryRow("[IU]", "international unit", "arbitrary"), AtomRow("x", "x", "a", 1, "[IU]", False)),
        )
