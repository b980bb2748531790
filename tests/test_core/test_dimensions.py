"""Tests for dimension vector primitives."""

import pytest

from ucumengine.core.dimensions import (
    ANGLE,
    CHARGE,
    CURRENT,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    LUMINOSITY,
    MASS,
    PRESSURE,
    TIME,
    VELOCITY,
    VOLUME,
    DimensionalError,
    DimensionVector,
)


def test_dimension_creation():
    length = DimensionVector(length=1)
    assert length.length == 1
    assert not length.is_dimensionless()


def test_dimension_multiplication():
    result = LENGTH * TIME
    assert result.length == 1
    assert result.time == 1


def test_dimension_division():
    assert LENGTH / TIME == VELOCITY


def test_dimension_power():
    assert (LENGTH**3) == VOLUME
    assert (VOLUME**-1).length == -3


def test_force_and_energy_construction():
    assert MASS * LENGTH / (TIME**2) == FORCE
    assert FORCE * LENGTH == ENERGY
    assert FORCE / (LENGTH**2) == PRESSURE


def test_current_is_charge_per_time():
    assert CHARGE / TIME == CURRENT
    assert CURRENT.sparse() == {"time": -1, "charge": 1}


def test_named_axes_render_with_their_symbols():
    assert str(ANGLE) == "A"
    assert str(CHARGE) == "Q"
    assert str(LUMINOSITY) == "F"
    assert ANGLE == DimensionVector.axis("angle")


def test_dimensionless_check():
    assert DIMENSIONLESS.is_dimensionless()
    assert (LENGTH / LENGTH).is_dimensionless()


def test_dimension_string_repr():
    assert str(DIMENSIONLESS) == "dimensionless"
    assert str(VOLUME**-1) == "L^-3"
    assert str(VELOCITY) == "L * T^-1"


def test_sparse_and_decomposition():
    per_volume_mass = MASS / VOLUME
    assert per_volume_mass.sparse() == {"length": -3, "mass": 1}
    assert per_volume_mass.decomposition() == [("m", -3), ("g", 1)]


def test_axis_lookup():
    assert DimensionVector.axis("temperature") == DimensionVector(temperature=1)
    with pytest.raises(DimensionalError):
        DimensionVector.axis("amount")


def test_tuple_round_trip():
    assert DimensionVector.from_tuple(FORCE.as_tuple()) == FORCE
    with pytest.raises(DimensionalError):
        DimensionVector.from_tuple((1, 2))


def test_invalid_dimension_exponent():
    with pytest.raises(DimensionalError):
        DimensionVector(length=1.5)  # type: ignore[arg-type]


def test_fractional_power_rejected():
    with pytest.raises(TypeError):
        LENGTH**0.5  # type: ignore[operator]


def test_dimension_immutability():
    dim = DimensionVector(length=1)
    with pytest.raises(AttributeError):
        dim.length = 2  # type: ignore[misc]
