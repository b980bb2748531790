"""Lexing and parsing of UCUM unit codes."""

from .grammar import (
    MAX_COMPONENTS,
    MAX_NESTING,
    BinaryOp,
    Expression,
    Group,
    Number,
    Parser,
    Symbol,
    Unity,
    iter_symbols,
    parse_expression,
)
from .quantity_text import QuantityText, split_quantity_text
from .tokenizer import Token, tokenize

__all__ = [
    "MAX_COMPONENTS",
    "MAX_NESTING",
    "BinaryOp",
    "Expression",
    "Group",
    "Number",
    "Parser",
    "Symbol",
    "Unity",
    "iter_symbols",
    "parse_expression",
    "QuantityText",
    "split_quantity_text",
    "Token",
    "tokenize",
]
