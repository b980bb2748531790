"""Recursive-descent parser producing an expression tree for a unit code.

Grammar (left-associative)::

    expression := '/' term | term
    term       := component (('.' | '/') component)*
    component  := factor exponent? annotation? | annotation
    factor     := number | atom | '(' term ')'

A leading ``/`` is an implicit numerator of one. The parser is purely
structural: atoms stay unresolved strings and no dimensional rule is checked
here.

Parenthesised groups may nest at most ``MAX_NESTING`` deep and a code may
hold at most ``MAX_COMPONENTS`` components.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from ..errors import UnitSyntaxError
from .tokenizer import Token, tokenize


@dataclass(frozen=True)
class Unity:
    """The factor one: an implicit numerator or a lone annotation."""

    position: int
    annotation: Optional[str] = None
    exponent: int = 1


@dataclass(frozen=True)
class Number:
    value: Union[int, float]
    text: str
    position: int
    exponent: int = 1
    annotation: Optional[str] = None

    @property
    def is_power_of_ten(self) -> bool:
        return self.text.startswith("10*") or self.text.startswith("10^")


@dataclass(frozen=True)
class Symbol:
    """An unresolved ``prefix? atom`` written in the code, with its exponent."""

    text: str
    position: int
    exponent: int = 1
    annotation: Optional[str] = None


@dataclass(frozen=True)
class Group:
    body: "Node"
    position: int
    exponent: int = 1
    annotation: Optional[str] = None


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"
    position: int


Node = Union[Unity, Number, Symbol, Group, BinaryOp]


@dataclass(frozen=True)
class Expression:
    """Parsed unit code: the source text and the root of its tree."""

    text: str
    root: Node

    def symbols(self) -> List[Symbol]:
        return list(iter_symbols(self.root))


def iter_symbols(node: Node) -> Iterator[Symbol]:
    """Yield every :class:`Symbol` in ``node`` from left to right."""
    if isinstance(node, Symbol):
        yield node
    elif isinstance(node, Group):
        yield from iter_symbols(node.body)
    elif isinstance(node, BinaryOp):
        yield from iter_symbols(node.left)
        yield from iter_symbols(node.right)


def _describe(token: Optional[Token]) -> str:
    if token is None:
        return "end of expression"
    return f"'{token.text}'"


class _TokenStream:
    def __init__(self, tokens: List[Token], original: str) -> None:
        self.tokens = tokens
        self.original = original
        self.index = 0
        self.depth = 0
        self.components = 0

    def peek(self) -> Optional[Token]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def position(self) -> int:
        token = self.peek()
        return token.start if token is not None else len(self.original)

    def fail(self, expected: str) -> UnitSyntaxError:
        return UnitSyntaxError(self.original, self.position(), expected, _describe(self.peek()))

    def pop(self, kind: str, expected: str) -> Token:
        token = self.peek()
        if token is None or token.kind != kind:
            raise self.fail(expected)
        self.index += 1
        return token


_FACTOR = "a unit symbol, number or '('"

MAX_NESTING = 32
MAX_COMPONENTS = 128


class Parser:
    """Builds an :class:`Expression` from a unit code."""

    def parse(self, text: str) -> Expression:
        if not isinstance(text, str):
            raise TypeError(f"Unit code must be a string, got {type(text)}")
        stream = _TokenStream(tokenize(text), text)
        if stream.peek() is None:
            raise UnitSyntaxError(text, 0, _FACTOR, "empty expression")

        root = self._parse_term(stream)
        if stream.peek() is not None:
            raise stream.fail("'.' or '/'")
        return Expression(text, root)

    def _parse_term(self, stream: _TokenStream) -> Node:
        token = stream.peek()
        if token is not None and token.kind == "op" and token.text == "/":
            stream.pop("op", "'/'")
            node: Node = BinaryOp("/", Unity(token.start), self._parse_component(stream), token.start)
        else:
            node = self._parse_component(stream)

        while True:
            token = stream.peek()
            if token is None or token.kind != "op":
                break
            stream.pop("op", "'.' or '/'")
            node = BinaryOp(token.text, node, self._parse_component(stream), token.start)
        return node

    def _parse_component(self, stream: _TokenStream) -> Node:
        token = stream.peek()
        stream.components += 1
        if stream.components > MAX_COMPONENTS:
            raise stream.fail(f"at most {MAX_COMPONENTS} components")
        if token is not None and token.kind == "annot":
            stream.pop("annot", "annotation")
            return Unity(token.start, annotation=str(token.value))

        node = self._parse_factor(stream)
        exponent = 1
        token = stream.peek()
        if token is not None and token.kind == "exp":
            stream.pop("exp", "exponent")
            exponent = int(token.value)  # type: ignore[arg-type]

        annotation = None
        token = stream.peek()
        if token is not None and token.kind == "annot":
            stream.pop("annot", "annotation")
            annotation = str(token.value)

        if exponent == 1 and annotation is None:
            return node
        if isinstance(node, Symbol):
            return Symbol(node.text, node.position, exponent, annotation)
        if isinstance(node, Number):
            return Number(node.value, node.text, node.position, exponent, annotation)
        assert isinstance(node, Group)
        return Group(node.body, node.position, exponent, annotation)

    def _parse_factor(self, stream: _TokenStream) -> Node:
        token = stream.peek()
        if token is None:
            raise stream.fail(_FACTOR)
        if token.kind == "num":
            stream.pop("num", "number")
            return Number(token.value, token.text, token.start)  # type: ignore[arg-type]
        if token.kind == "atom":
            stream.pop("atom", "unit symbol")
            return Symbol(token.text, token.start)
        if token.kind == "lpar":
            if stream.depth == MAX_NESTING:
                raise stream.fail(f"at most {MAX_NESTING} nested groups")
            stream.pop("lpar", "'('")
            stream.depth += 1
            body = self._parse_term(stream)
            stream.pop("rpar", "')'")
            stream.depth -= 1
            return Group(body, token.start)
        raise stream.fail(_FACTOR)


_PARSER = Parser()


def parse_expression(text: str) -> Expression:
    """Parse ``text`` into an :class:`Expression` or raise a :class:`ParseError`."""

    return _PARSER.parse(text)


__all__ = [
    "BinaryOp",
    "Expression",
    "Group",
    "MAX_COMPONENTS",
    "MAX_NESTING",
    "Node",
    "Number",
    "Parser",
    "Symbol",
    "Unity",
    "iter_symbols",
    "parse_expression",
]
