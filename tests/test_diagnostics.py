"""Tests for validate, info and display."""

import pytest

from ucumengine import display, info, validate
from ucumengine.core.types import UnitKind
from ucumengine.errors import SemanticError, UnknownUnitError


def test_validate_valid_code():
    result = validate("mg/dL")
    assert result.valid
    assert result.errors == []
    assert result.code == "mg/dL"


def test_validate_unknown_unit_suggests():
    result = validate("invalid_unit")
    assert not result.valid
    assert result.errors
    issue = result.errors[0]
    assert issue.position == 0
    assert issue.suggestion == "[in_i]"


def test_validate_reports_every_unknown_symbol():
    result = validate("mgg/dLL")
    assert [issue.position for issue in result.errors] == [0, 4]
    assert all(issue.suggestion for issue in result.errors)


def test_validate_syntax_error_context():
    result = validate("mmol//L")
    assert not result.valid
    issue = result.errors[0]
    assert issue.position == 5
    assert issue.context == "mol//L"
    assert "Expected" in issue.message


def test_validate_lex_error():
    result = validate("mg dL")
    assert not result.valid
    assert result.errors[0].position == 2


def test_validate_semantic_error():
    result = validate("Cel/s")
    assert not result.valid
    assert "composed" in result.errors[0].message
    assert result.errors[0].suggestion is None


@pytest.mark.parametrize("bad", ["", "   ", None, 42, "mg/", "[lb_av"])
def test_validate_never_raises(bad):
    result = validate(bad)  # type: ignore[arg-type]
    assert not result.valid
    assert result.errors


DEEPLY_NESTED = "(" * 2000 + "m" + ")" * 2000
LONG_PRODUCT = ".".join(["m"] * 2000)


@pytest.mark.parametrize(
    "code, position",
    [
        ("km400", 0),
        ("10*400", 0),
        ("m.\u00b2", 2),
        (DEEPLY_NESTED, 32),
        (LONG_PRODUCT, 256),
    ],
)
def test_validate_rejects_codes_beyond_engine_limits(code, position):
    result = validate(code)
    assert not result.valid
    assert result.errors[0].position == position


def test_validate_reports_magnitude_overflow():
    issue = validate("km400").errors[0]
    assert issue.message == "Unit magnitude out of range"
    assert issue.context == "km400"


def test_validate_warns_about_annotations():
    result = validate("10*3{cells}/uL")
    assert result.valid
    assert result.warnings == ["Annotation '{cells}' is informational and ignored in conversion"]


def test_info_for_concentration():
    summary = info("mg/dL")
    assert summary.dimension == {"length": -3, "mass": 1}
    assert summary.type is UnitKind.METRIC
    assert summary.canonical == [("m", -3), ("g", 1)]
    assert summary.is_metric
    assert not summary.is_special
    assert not summary.is_arbitrary


def test_info_for_special_and_arbitrary():
    celsius = info("Cel")
    assert celsius.type is UnitKind.SPECIAL
    assert celsius.is_special
    assert celsius.dimension == {"temperature": 1}

    iu = info("[IU]")
    assert iu.type is UnitKind.ARBITRARY
    assert iu.is_arbitrary


def test_info_for_non_metric():
    assert info("[lb_av]").type is UnitKind.NON_METRIC


def test_info_raises_on_invalid_code():
    with pytest.raises(UnknownUnitError):
        info("invalid_unit")
    with pytest.raises(SemanticError):
        info("Cel2")


@pytest.mark.parametrize(
    "code, expected",
    [
        ("mg", "milligram"),
        ("mg/dL", "milligram per deciliter"),
        ("mmol/L", "millimole per liter"),
        ("kg.m/s2", "kilogram meter per square second"),
        ("m3", "cubic meter"),
        ("/min", "per minute"),
        ("10*6/uL", "10^6 per microliter"),
        ("s-1", "per second"),
        ("m4", "meter^4"),
        ("Cel", "degree Celsius"),
        ("mm[Hg]", "millimeter of mercury column"),
        ("(m.s)2", "square meter square second"),
    ],
)
def test_display_names(code, expected):
    assert display(code) == expected


@pytest.mark.parametrize(
    "code", ["invalid_unit", "mg//dL", "{cells}", "", "m.\u00b2", DEEPLY_NESTED, LONG_PRODUCT]
)
def test_display_falls_back_to_code(code):
    assert display(code) == code


def test_display_names_codes_whose_magnitude_overflows():
    assert display("km400") == "kilometer^400"
