"""Tokens and instruction models for the stack VM language."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union


class LexError(ValueError):
    """Raised when the input holds text that is not a valid token."""

    def __init__(self, position: int, text: str = "") -> None:
        super().__init__("unexpected token")
        self.position = position
        self.text = text


class TokenKind(enum.Enum):
    PUSH = "push"
    POP = "pop"

    CONSTANT = "constant"
    LOCAL = "local"
    ARGUMENT = "argument"
    THIS = "this"
    THAT = "that"
    STATIC = "static"
    TEMP = "temp"
    POINTER = "pointer"

    ADD = "add"
    SUBTRACT = "sub"
    NEGATE = "neg"
    EQUAL = "eq"
    GREATER = "gt"
    LESS = "lt"
    AND = "and"
    OR = "or"
    NOT = "not"

    LITERAL = "<literal>"
    NEWLINE = "<newline>"


@dataclass(frozen=True)
class Token:
    """A lexed token with its text and its span in the source."""

    kind: TokenKind
    text: str
    start: int
    end: int


_KEYWORDS = {
    kind.value: kind
    for kind in TokenKind
    if kind not in (TokenKind.LITERAL, TokenKind.NEWLINE)
}

# Longer keywords first so alternation always yields the longest match.
_KEYWORD_PATTERN = "|".join(
    re.escape(word) for word in sorted(_KEYWORDS, key=len, reverse=True)
)
_TOKEN_RE = re.compile(
    rf"(?P<keyword>{_KEYWORD_PATTERN})|(?P<literal>[0-9]+)|(?P<newline>\n)"
)
_SKIP_RE = re.compile(r"[ \t\f]+")


def tokenize(source: str) -> list[Token]:
    """Split source text into tokens, raising LexError on the first bad one."""
    tokens: list[Token] = []
    pos = 0
    length = len(source)
    while pos < length:
        skipped = _SKIP_RE.match(source, pos)
        if skipped:
            pos = skipped.end()
            continue
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise LexError(pos, source[pos])
        text = match.group()
        if match.lastgroup == "keyword":
            kind = _KEYWORDS[text]
        elif match.lastgroup == "literal":
            kind = TokenKind.LITERAL
        else:
            kind = TokenKind.NEWLINE
        tokens.append(Token(kind, text, pos, match.end()))
        pos = match.end()
    return tokens


class StackSegment(enum.Enum):
    CONSTANT = "constant"
    LOCAL = "local"
    ARGUMENT = "argument"
    THIS = "this"
    THAT = "that"
    STATIC = "static"
    TEMP = "temp"
    POINTER = "pointer"


class Opcode(enum.Enum):
    ADD = "add"
    SUBTRACT = "sub"
    NEGATE = "neg"
    EQUAL = "eq"
    GREATER = "gt"
    LESS = "lt"
    AND = "and"
    OR = "or"
    NOT = "not"


@dataclass(frozen=True)
class Push:
    """Push the value at segment[literal] onto the stack."""

    segment: StackSegment
    literal: str


@dataclass(frozen=True)
class Pop:
    """Pop the top of the stack into segment[literal]."""

    segment: StackSegment
    literal: str


@dataclass(frozen=True)
class Arithmetic:
    """An arithmetic or logical stack operation."""

    opcode: Opcode


Instruction = Union[Push, Pop, Arithmetic]