"""Assembly generation for single stack VM instructions."""

from __future__ import annotations

from .models import Arithmetic, Instruction, Opcode, Pop, Push, StackSegment

_PUSH_D = "@SP\nA=M\nM=D\n@SP\nM=M+1\n"
_POP_TO_D = "@SP\nAM=M-1\nD=M\n"
_LOAD_TOP = "@SP\nA=M-1\n"

_U32_MAX = 2**32 - 1

_BASE_REGISTERS = {
    StackSegment.LOCAL: "LCL",
    StackSegment.ARGUMENT: "ARG",
    StackSegment.THIS: "THIS",
    StackSegment.THAT: "THAT",
}

_POINTERS = {"0": "@THIS\n", "1": "@THAT\n"}

_BINARY_OPS = {
    Opcode.ADD: "M=M+D\n",
    Opcode.SUBTRACT: "M=M-D\n",
    Opcode.AND: "M=M&D\n",
    Opcode.OR: "M=M|D\n",
    Opcode.NOT: "M=!M\n",
}

_COMPARISON_JUMPS = {
    Opcode.EQUAL: "JEQ",
    Opcode.GREATER: "JGE",
    Opcode.LESS: "JLE",
}


class GenerateError(Exception):
    """Base class for code generation failures."""


class InvalidSyntaxError(GenerateError):
    def __init__(self, message: str) -> None:
        super().__init__(f"syntax error: {message}")
        self.message = message


class NotIntError(GenerateError):
    def __init__(self, literal: str) -> None:
        super().__init__(f"not an int: invalid digit found in {literal!r}")
        self.literal = literal


class SegmentOverflowError(GenerateError):
    def __init__(self) -> None:
        super().__init__("trying to access outside of a segment")


def _parse_u32(literal: str) -> int:
    digits = literal[1:] if literal.startswith("+") else literal
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise NotIntError(literal)
    value = int(digits)
    if value > _U32_MAX:
        raise NotIntError(literal)
    return value


def segment_address(segment: StackSegment, scope: str, literal: str) -> str:
    """Return assembly that leaves the address of segment[literal] in A."""
    if segment is StackSegment.CONSTANT:
        raise InvalidSyntaxError("constant has no address")
    if segment in _BASE_REGISTERS:
        base = _BASE_REGISTERS[segment]
        return f"@{base}\nD=M\n@{literal}\nA=D+A\n"
    if segment is StackSegment.STATIC:
        return f"@{scope}.{literal}\n"
    if segment is StackSegment.TEMP:
        index = _parse_u32(literal)
        if index > 7:
            raise SegmentOverflowError()
        return f"@{5 + index}\n"
    try:
        return _POINTERS[literal]
    except KeyError:
        raise InvalidSyntaxError("no such pointer") from None


def load_to_d(segment: StackSegment, scope: str, literal: str) -> str:
    """Return assembly that loads the value of segment[literal] into D."""
    if segment is StackSegment.CONSTANT:
        return f"@{literal}\nD=A\n"
    return f"{segment_address(segment, scope, literal)}D=M\n"


def _comparison(jump: str, label: str) -> str:
    return (
        f"{_POP_TO_D}{_LOAD_TOP}"
        f"D=M-D\n"
        f"@TRUE.{label}\n"
        f"D;{jump}\n"
        f"{_LOAD_TOP}"
        f"M=-1\n"
        f"@END.{label}\n"
        f"0;JMP\n"
        f"(TRUE.{label})\n"
        f"{_LOAD_TOP}"
        f"M=0\n"
        f"(END.{label})\n"
    )


def generate_instruction(instr: Instruction, scope: str, count: int) -> str:
    """Return the assembly for one instruction at position count in scope."""
    label = f"{scope}.{count}"
    match instr:
        case Push(segment=segment, literal=literal):
            return f"{load_to_d(segment, scope, literal)}{_PUSH_D}"
        case Pop(segment=segment, literal=literal):
            return f"{_POP_TO_D}{segment_address(segment, scope, literal)}M=D\n"
        case Arithmetic(opcode=Opcode.NEGATE):
            return f"{_LOAD_TOP}M=-M\n"
        case Arithmetic(opcode=opcode) if opcode in _BINARY_OPS:
            return f"{_POP_TO_D}{_LOAD_TOP}{_BINARY_OPS[opcode]}"
        case Arithmetic(opcode=opcode) if opcode in _COMPARISON_JUMPS:
            return _comparison(_COMPARISON_JUMPS[opcode], label)
    raise TypeError(f"not an instruction: {instr!r}")