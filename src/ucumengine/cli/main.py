"""Command-line interface for the UCUM unit engine."""

from __future__ import annotations

import json

import click
from pydantic import BaseModel

from ..api import convert as convert_value
from ..api import quantity
from ..config import LOG_LEVEL
from ..diagnostics import display as display_name
from ..diagnostics import info as unit_info
from ..diagnostics import validate as validate_code
from ..errors import UcumError
from ..observability import configure_logging
from ..schemas import (
    ComparisonModel,
    ConversionModel,
    ErrorModel,
    InfoModel,
    QuantityModel,
    ValidationModel,
)
from ..units.arithmetic import add as add_quantities
from ..units.arithmetic import compare as compare_quantities
from ..units.arithmetic import subtract as subtract_quantities

# Values such as "-40" must reach the command as arguments, not options.
_NUMERIC_ARGS = {"ignore_unknown_options": True}


def _emit(model: BaseModel) -> None:
    click.echo(json.dumps(model.model_dump(), indent=2))


def _fail(exc: UcumError) -> None:
    _emit(ErrorModel(error=type(exc).__name__, message=exc.message, position=exc.position))
    click.get_current_context().exit(1)


@click.group()
@click.option(
    "--log-level",
    default=LOG_LEVEL,
    show_default=True,
    help="Logging level for engine diagnostics.",
)
def cli(log_level: str) -> None:
    """UCUM unit expression tools."""

    configure_logging(log_level)


@cli.command()
@click.argument("code")
def validate(code: str) -> None:
    """Check CODE and report every problem found. Exits 1 when invalid."""

    result = validate_code(code)
    _emit(ValidationModel.from_result(result))
    if not result.valid:
        click.get_current_context().exit(1)


@cli.command(context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.argument("from_code")
@click.argument("to_code")
def convert(value: float, from_code: str, to_code: str) -> None:
    """Convert VALUE from FROM_CODE to TO_CODE."""

    try:
        result = convert_value(value, from_code, to_code)
    except UcumError as exc:
        _fail(exc)
        return
    _emit(ConversionModel(value=value, from_code=from_code, to_code=to_code, result=result))


@cli.command()
@click.argument("code")
def info(code: str) -> None:
    """Show the dimension and classification of CODE."""

    try:
        summary = unit_info(code)
    except UcumError as exc:
        _fail(exc)
        return
    _emit(InfoModel.from_info(summary, display_name(code)))


@cli.command()
@click.argument("code")
def display(code: str) -> None:
    """Print the long name of CODE."""

    click.echo(display_name(code))


def _operands(value_a: float, code_a: str, value_b: float, code_b: str):
    return quantity(value_a, code_a), quantity(value_b, code_b)


@cli.command(context_settings=_NUMERIC_ARGS)
@click.argument("value_a", type=float)
@click.argument("code_a")
@click.argument("value_b", type=float)
@click.argument("code_b")
def compare(value_a: float, code_a: str, value_b: float, code_b: str) -> None:
    """Compare VALUE_A CODE_A against VALUE_B CODE_B."""

    try:
        a, b = _operands(value_a, code_a, value_b, code_b)
    except UcumError as exc:
        _fail(exc)
        return
    _emit(ComparisonModel.from_result(compare_quantities(a, b)))


@cli.command(context_settings=_NUMERIC_ARGS)
@click.argument("value_a", type=float)
@click.argument("code_a")
@click.argument("value_b", type=float)
@click.argument("code_b")
def add(value_a: float, code_a: str, value_b: float, code_b: str) -> None:
    """Add VALUE_B CODE_B to VALUE_A CODE_A, answering in CODE_A."""

    try:
        a, b = _operands(value_a, code_a, value_b, code_b)
        total = add_quantities(a, b)
    except UcumError as exc:
        _fail(exc)
        return
    _emit(QuantityModel.from_quantity(total))


@cli.command(context_settings=_NUMERIC_ARGS)
@click.argument("value_a", type=float)
@click.argument("code_a")
@click.argument("value_b", type=float)
@click.argument("code_b")
def subtract(value_a: float, code_a: str, value_b: float, code_b: str) -> None:
    """Subtract VALUE_B CODE_B from VALUE_A CODE_A, answering in CODE_A."""

    try:
        a, b = _operands(value_a, code_a, value_b, code_b)
        difference = subtract_quantities(a, b)
    except UcumError as exc:
        _fail(exc)
        return
    _emit(QuantityModel.from_quantity(difference))


if __name__ == "__main__":
    cli()
