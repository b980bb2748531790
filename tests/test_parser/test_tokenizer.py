"""Tests for the unit-code lexer."""

import math

import pytest

from ucumengine.errors import LexError
from ucumengine.parser import tokenize


def kinds(text):
    return [token.kind for token in tokenize(text)]


def test_simple_ratio():
    tokens = tokenize("mg/dL")
    assert [(t.kind, t.text, t.start) for t in tokens] == [
        ("atom", "mg", 0),
        ("op", "/", 2),
        ("atom", "dL", 3),
    ]


def test_attached_exponents():
    tokens = tokenize("kg.m/s2")
    assert kinds("kg.m/s2") == ["atom", "op", "atom", "op", "atom", "exp"]
    assert tokens[-1].value == 2
    assert tokenize("s-1")[1].value == -1


def test_caret_exponent():
    tokens = tokenize("m^-2")
    assert [t.kind for t in tokens] == ["atom", "exp"]
    assert tokens[1].value == -2


def test_power_of_ten_number():
    tokens = tokenize("10*6/uL")
    assert tokens[0].kind == "num"
    assert tokens[0].text == "10*6"
    assert tokens[0].value == 10**6

    negative = tokenize("10*-3")
    assert negative[0].value == pytest.approx(1e-3)
    assert tokenize("10^3")[0].value == 1000


def test_bracket_atoms_are_single_tokens():
    tokens = tokenize("[lb_av]/[in_i]2")
    assert [t.text for t in tokens] == ["[lb_av]", "/", "[in_i]", "2"]
    assert tokenize("mm[Hg]")[0].text == "mm[Hg]"


def test_parentheses_group():
    assert kinds("kg/(m.s2)") == ["atom", "op", "lpar", "atom", "op", "atom", "exp", "rpar"]


def test_exponent_after_group():
    assert kinds("(m.s)2") == ["lpar", "atom", "op", "atom", "rpar", "exp"]


def test_annotation_is_opaque():
    tokens = tokenize("10*3{cells}/uL")
    annotation = tokens[1]
    assert annotation.kind == "annot"
    assert annotation.value == "cells"
    assert annotation.text == "{cells}"


def test_plain_number():
    tokens = tokenize("1/min")
    assert tokens[0].kind == "num"
    assert tokens[0].value == 1


@pytest.mark.parametrize(
    "text, position",
    [
        ("mg dL", 2),
        ("mg/d#L", 4),
        ("[lb_av", 0),
        ("mg{cells", 2),
        ("m^", 2),
        ("-1", 0),
        ("{a{b}}", 2),
        ("m.\u00b2", 2),
        ("m\u00b2", 1),
        ("m.\u0663", 2),
        ("m^\u0662", 2),
    ],
)
def test_lex_errors_carry_offsets(text, position):
    with pytest.raises(LexError) as excinfo:
        tokenize(text)
    assert excinfo.value.position == position


def test_lex_error_renders_pointer():
    with pytest.raises(LexError) as excinfo:
        tokenize("mg$")
    rendered = str(excinfo.value)
    assert rendered.splitlines()[-1] == "  ^"


def test_powers_of_ten_beyond_float_range():
    assert tokenize("10*400")[0].value == math.inf
    assert tokenize("10*" + "9" * 30)[0].value == math.inf
    assert tokenize("10*-400")[0].value == 0.0
