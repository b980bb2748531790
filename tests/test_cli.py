"""Tests for the ucum command-line interface."""

import json

import pytest
from click.testing import CliRunner

from ucumengine.cli.main import cli


def run(*args):
    result = CliRunner().invoke(cli, list(args))
    return result, result.output


def test_validate_valid():
    result, output = run("validate", "mg/dL")
    assert result.exit_code == 0
    payload = json.loads(output)
    assert payload["valid"] is True
    assert payload["code"] == "mg/dL"


def test_validate_invalid_exits_non_zero():
    result, output = run("validate", "invalid_unit")
    assert result.exit_code == 1
    payload = json.loads(output)
    assert payload["valid"] is False
    assert payload["errors"][0]["suggestion"]


def test_convert():
    result, output = run("convert", "0", "Cel", "[degF]")
    assert result.exit_code == 0
    payload = json.loads(output)
    assert payload["result"] == 32
    assert payload["from_code"] == "Cel"


def test_convert_negative_value():
    result, output = run("convert", "-40", "Cel", "[degF]")
    assert result.exit_code == 0
    assert json.loads(output)["result"] == -40


def test_convert_incompatible():
    result, output = run("convert", "100", "kg", "mmol/L")
    assert result.exit_code == 1
    payload = json.loads(output)
    assert payload["error"] == "IncompatibleDimensionsError"


def test_info():
    result, output = run("info", "mg/dL")
    assert result.exit_code == 0
    payload = json.loads(output)
    assert payload["type"] == "metric"
    assert payload["dimension"] == {"length": -3, "mass": 1}
    assert payload["canonical"] == [["m", -3], ["g", 1]]
    assert payload["display"] == "milligram per deciliter"


def test_info_unknown_symbol():
    result, output = run("info", "mgg")
    assert result.exit_code == 1
    payload = json.loads(output)
    assert payload["error"] == "UnknownUnitError"
    assert payload["position"] == 0


def test_display():
    result, output = run("display", "mmol/L")
    assert result.exit_code == 0
    assert output.strip() == "millimole per liter"


def test_compare():
    result, output = run("compare", "7.5", "mmol/L", "6.0", "mmol/L")
    assert result.exit_code == 0
    payload = json.loads(output)
    assert payload["comparison"] == 1
    assert payload["convertible"] is True
    assert payload["description"] == "Greater than"


def test_compare_incompatible_is_reported():
    result, output = run("compare", "1", "kg", "1", "mmol/L")
    assert result.exit_code == 0
    assert json.loads(output)["convertible"] is False


def test_add_and_subtract():
    result, output = run("add", "1", "kg", "500", "g")
    assert result.exit_code == 0
    assert json.loads(output) == {"value": 1.5, "code": "kg", "unit": "kilogram"}

    result, output = run("subtract", "1", "L", "250", "mL")
    assert result.exit_code == 0
    assert json.loads(output)["value"] == pytest.approx(0.75)


def test_add_incompatible():
    result, output = run("add", "1", "kg", "1", "[IU]")
    assert result.exit_code == 1
    assert json.loads(output)["error"] == "ArbitraryUnitMismatchError"
