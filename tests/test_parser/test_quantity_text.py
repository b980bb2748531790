import pytest

from ucumengine.errors import UnitSyntaxError
from ucumengine.parser import split_quantity_text


def test_value_and_code():
    literal = split_quantity_text("100 mg/dL")
    assert literal.value == 100.0
    assert literal.code == "mg/dL"
    assert literal.offset == 4


@pytest.mark.parametrize(
    "text, value",
    [("-40 Cel", -40.0), ("1.5e3 g", 1500.0), (".5 L", 0.5), ("  7.5   mmol/L ", 7.5)],
)
def test_numeric_forms(text, value):
    assert split_quantity_text(text).value == value


def test_bare_code_defaults_to_one():
    literal = split_quantity_text(" mg/dL")
    assert literal.value == 1.0
    assert literal.code == "mg/dL"
    assert literal.offset == 1


def test_empty_text_rejected():
    with pytest.raises(UnitSyntaxError):
        split_quantity_text("   ")
