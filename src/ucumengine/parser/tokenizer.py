"""Lexer for UCUM unit codes."""

from __future__ import annotations

import math
import re
from typing import List, NamedTuple, Optional, Union

from ..errors import LexError


class Token(NamedTuple):
    """A lexed token.

    ``kind`` is one of ``num``, ``atom``, ``op``, ``exp``, ``lpar``, ``rpar``
    or ``annot``. ``value`` carries the numeric value of ``num`` and ``exp``
    tokens and the inner text of ``annot`` tokens.
    """

    kind: str
    text: str
    start: int
    end: int
    value: Optional[Union[int, float, str]] = None


_SIGNED_INT = re.compile(r"[+-]?\d+", re.ASCII)
_UNSIGNED_INT = re.compile(r"\d+", re.ASCII)
_TEN_POWER = re.compile(r"10[*^]([+-]?\d+)", re.ASCII)

_DIGITS = frozenset("0123456789")
# Largest power of ten that still fits in a float.
_MAX_TEN_POWER = 308

_ATOM_PUNCTUATION = frozenset("%'\"_")


def _is_atom_char(ch: str) -> bool:
    return ch.isalpha() or ch in _ATOM_PUNCTUATION


def _attaches_exponent(tokens: List[Token], pos: int) -> bool:
    """An integer written flush against an atom or ``)`` is its exponent."""
    if not tokens:
        return False
    previous = tokens[-1]
    return previous.end == pos and previous.kind in ("atom", "rpar")


def _integer(match: re.Match[str], text: str, group: int = 0) -> int:
    try:
        return int(match.group(group))
    except ValueError:
        # int() refuses digit strings beyond the interpreter's conversion limit
        raise LexError("Integer is too long", text, match.start(group)) from None


def _power_of_ten(exponent: int) -> Union[int, float]:
    """``10 ** exponent``, with ``inf`` standing in for powers too large for a float."""
    if exponent > _MAX_TEN_POWER:
        return math.inf
    if exponent < 0:
        return 10.0 ** max(exponent, -_MAX_TEN_POWER - 30)
    return 10 ** exponent


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into tokens, raising :class:`LexError` on bad input."""

    tokens: List[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]

        if ch in "./":
            tokens.append(Token("op", ch, pos, pos + 1))
            pos += 1
            continue
        if ch == "(":
            tokens.append(Token("lpar", ch, pos, pos + 1))
            pos += 1
            continue
        if ch == ")":
            tokens.append(Token("rpar", ch, pos, pos + 1))
            pos += 1
            continue

        if ch == "{":
            end = text.find("}", pos + 1)
            if end == -1:
                raise LexError("Unterminated annotation '{'", text, pos)
            body = text[pos + 1 : end]
            if "{" in body:
                raise LexError("Nested '{' inside annotation", text, pos + 1 + body.index("{"))
            tokens.append(Token("annot", text[pos : end + 1], pos, end + 1, body))
            pos = end + 1
            continue

        if ch == "^":
            match = _SIGNED_INT.match(text, pos + 1)
            if not match:
                raise LexError("Expected an integer exponent after '^'", text, pos + 1)
            tokens.append(Token("exp", text[pos : match.end()], pos, match.end(), _integer(match, text)))
            pos = match.end()
            continue

        if ch in _DIGITS or ch in "+-":
            if _attaches_exponent(tokens, pos):
                match = _SIGNED_INT.match(text, pos)
                if not match:
                    raise LexError(f"Unexpected character '{ch}' in unit expression", text, pos)
                tokens.append(Token("exp", match.group(), pos, match.end(), _integer(match, text)))
                pos = match.end()
                continue
            if ch not in _DIGITS:
                raise LexError(f"Unexpected character '{ch}' in unit expression", text, pos)
            match = _TEN_POWER.match(text, pos)
            if match:
                value = _power_of_ten(_integer(match, text, 1))
                tokens.append(Token("num", match.group(), pos, match.end(), value))
                pos = match.end()
                continue
            match = _UNSIGNED_INT.match(text, pos)
            if not match:
                raise LexError(f"Unexpected character '{ch}' in unit expression", text, pos)
            tokens.append(Token("num", match.group(), pos, match.end(), _integer(match, text)))
            pos = match.end()
            continue

        if ch == "[" or _is_atom_char(ch):
            start = pos
            while pos < length:
                current = text[pos]
                if current == "[":
                    close = text.find("]", pos + 1)
                    if close == -1:
                        raise LexError("Unterminated '[' in unit symbol", text, pos)
                    pos = close + 1
                elif _is_atom_char(current):
                    pos += 1
                else:
                    break
            tokens.append(Token("atom", text[start:pos], start, pos))
            continue

        raise LexError(f"Unexpected character '{ch}' in unit expression", text, pos)

    return tokens


__all__ = ["Token", "tokenize"]
