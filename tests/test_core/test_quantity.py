"""Tests for the Quantity value type."""

import pytest

from ucumengine import quantity
from ucumengine.core.quantity import Quantity
from ucumengine.parser import parse_expression


def test_quantity_defaults_unit_to_code():
    expression = parse_expression("mg")
    value = Quantity(750, "mg", expression)
    assert value.unit == "mg"
    assert value.expression is expression


def test_quantity_string_trims_value():
    assert str(quantity(750.0, "mg")) == "750 mg"
    assert str(quantity(5.5, "mmol/L")) == "5.5 mmol/L"


def test_quantity_to_dict_uses_long_name():
    assert quantity(100, "mg/dL").to_dict() == {
        "value": 100,
        "code": "mg/dL",
        "unit": "milligram per deciliter",
    }


def test_with_value_keeps_unit():
    original = quantity(1, "kg")
    updated = original.with_value(2.5)
    assert updated.value == 2.5
    assert updated.code == "kg"
    assert updated.unit == original.unit


@pytest.mark.parametrize("bad", ["10", None, True])
def test_quantity_rejects_non_numbers(bad):
    with pytest.raises(TypeError):
        Quantity(bad, "mg", parse_expression("mg"))  # type: ignore[arg-type]


def test_quantity_is_immutable():
    value = quantity(1, "g")
    with pytest.raises(AttributeError):
        value.value = 2  # type: ignore[misc]
