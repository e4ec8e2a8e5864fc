"""Parsing stack VM source and translating whole programs to assembly."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .generate import GenerateError, generate_instruction
from .models import (
    Arithmetic,
    Instruction,
    LexError,
    Opcode,
    Pop,
    Push,
    StackSegment,
    Token,
    TokenKind,
    tokenize,
)

_SEGMENT_KINDS = {
    TokenKind(segment.value): segment for segment in StackSegment
}
_OPCODE_KINDS = {TokenKind(opcode.value): opcode for opcode in Opcode}


class VMError(Exception):
    """Base class for failures while translating a VM program."""


class LexingError(VMError):
    def __init__(self, source: LexError) -> None:
        super().__init__(f"error while lexing: {source}")
        self.source = source


class ParsingError(VMError):
    def __init__(self, token: Token | None = None) -> None:
        super().__init__("error while parsing")
        self.token = token


class GeneratingError(VMError):
    def __init__(self, source: GenerateError) -> None:
        super().__init__(f"error while generating: {source}")
        self.source = source


def _parse_line(line: Sequence[Token]) -> Instruction:
    if not line:
        raise ParsingError()
    head, *rest = line
    if head.kind in _OPCODE_KINDS:
        if rest:
            raise ParsingError(rest[0])
        return Arithmetic(_OPCODE_KINDS[head.kind])
    if head.kind in (TokenKind.PUSH, TokenKind.POP):
        if len(rest) < 2:
            raise ParsingError(rest[0] if rest else head)
        segment_token, literal_token, *extra = rest
        if segment_token.kind not in _SEGMENT_KINDS:
            raise ParsingError(segment_token)
        if literal_token.kind is not TokenKind.LITERAL:
            raise ParsingError(literal_token)
        if extra:
            raise ParsingError(extra[0])
        segment = _SEGMENT_KINDS[segment_token.kind]
        cls = Push if head.kind is TokenKind.PUSH else Pop
        return cls(segment, literal_token.text)
    raise ParsingError(head)


def _split_lines(tokens: list[Token]) -> list[list[Token]]:
    lines: list[list[Token]] = [[]]
    for token in tokens:
        if token.kind is TokenKind.NEWLINE:
            lines.append([])
        else:
            lines[-1].append(token)
    return lines


def parse(source: str) -> list[Instruction]:
    """Parse VM source into instructions, one per line.

    One leading and one trailing newline are allowed; instructions are
    otherwise separated by exactly one newline.
    """
    try:
        tokens = tokenize(source)
    except LexError as exc:
        raise LexingError(exc) from exc

    if tokens and tokens[0].kind is TokenKind.NEWLINE:
        tokens = tokens[1:]
    if not tokens:
        return []
    if tokens[-1].kind is TokenKind.NEWLINE:
        tokens = tokens[:-1]
    return [_parse_line(line) for line in _split_lines(tokens)]


def generate(instructions: Iterable[Instruction], scope: str) -> str:
    """Translate instructions to assembly, using scope for labels and statics."""
    try:
        return "".join(
            generate_instruction(instr, scope, index)
            for index, instr in enumerate(instructions)
        )
    except GenerateError as exc:
        raise GeneratingError(exc) from exc