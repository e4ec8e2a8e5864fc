import pytest

from hackvm.models import (
    Arithmetic,
    LexError,
    Opcode,
    Pop,
    Push,
    StackSegment,
    Token,
    TokenKind,
    tokenize,
)


def kinds(source):
    return [token.kind for token in tokenize(source)]


def test_push_line_kinds():
    assert kinds("push constant 1\n") == [
        TokenKind.PUSH,
        TokenKind.CONSTANT,
        TokenKind.LITERAL,
        TokenKind.NEWLINE,
    ]


def test_literal_text_kept():
    tokens = tokenize("push constant 17")
    assert tokens[-1].text == "17"


def test_whitespace_skipped():
    assert kinds(" \t\fadd \t") == [TokenKind.ADD]


def test_empty_source():
    assert tokenize("") == []


@pytest.mark.parametrize("kind", [k for k in TokenKind if k not in (TokenKind.LITERAL, TokenKind.NEWLINE)])
def test_every_keyword_lexes(kind):
    tokens = tokenize(kind.value)
    assert [t.kind for t in tokens] == [kind]
    assert tokens[0].text == kind.value


def test_longest_match_pointer_over_pop():
    assert kinds("pointer pop") == [TokenKind.POINTER, TokenKind.POP]


def test_spans_cover_text():
    source = "pop local 3\nneg"
    for token in tokenize(source):
        assert source[token.start:token.end] == token.text


def test_token_equality():
    assert tokenize("or")[0] == Token(TokenKind.OR, "or", 0, 2)


def test_unknown_character_raises():
    with pytest.raises(LexError) as info:
        tokenize("push x")
    assert info.value.position == 5
    assert str(info.value) == "unexpected token"


def test_trailing_garbage_after_keyword_raises():
    with pytest.raises(LexError):
        tokenize("pushx")


def test_carriage_return_rejected():
    with pytest.raises(LexError):
        tokenize("add\r\n")


def test_instruction_models_compare_by_value():
    assert Push(StackSegment.LOCAL, "2") == Push(StackSegment.LOCAL, "2")
    assert Push(StackSegment.LOCAL, "2") != Pop(StackSegment.LOCAL, "2")
    assert Arithmetic(Opcode.ADD) == Arithmetic(Opcode.ADD)


def test_segment_and_opcode_names():
    assert StackSegment("pointer") is StackSegment.POINTER
    assert Opcode("sub") is Opcode.SUBTRACT