import pytest

from frothy.errors import UnexpectedByte, InvalidNumber, InvalidUtf8
from frothy.reader.lexer import (
    lex,
    Tokens,
    Ident,
    Number,
    Plus,
    Minus,
    Multiply,
    Divide,
    OpenBrace,
    CloseBrace,
    Assign,
    OpenParen,
    CloseParen,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 +", [Number(1), Number(2), Plus]),
        ("-5", [Number(-5)]),
        ("- 5", [Minus, Number(5)]),
        ("5 -", [Number(5), Minus]),
        ("3-2", [Number(3), Number(-2)]),
        ("1.5 0.25", [Number(1.5), Number(0.25)]),
        ("12abc", [Number(12), Ident("abc")]),
        ("print_arg PI Nil", [Ident("print_arg"), Ident("PI"), Ident("Nil")]),
        ("abc1_2", [Ident("abc1_2")]),
        ("{ } = * /", [OpenBrace, CloseBrace, Assign, Multiply, Divide]),
        ("(x)", [OpenParen, Ident("x"), CloseParen]),
        ("{1}", [OpenBrace, Number(1), CloseBrace]),
        ("# comment\n x", [Ident("x")]),
        ("x # trailing comment", [Ident("x")]),
        ("a#b\nc", [Ident("a"), Ident("c")]),
        (" \t\r\n\x0c", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert lex(source) == expected


def test_number_values_are_floats():
    token, = lex("42")
    assert isinstance(token.value, float)
    assert token.value == 42.0


def test_lex_accepts_bytes():
    assert lex(b"1 x") == [Number(1), Ident("x")]


@pytest.mark.parametrize(
    "source,byte,offset",
    [
        ("@", ord("@"), 0),
        ("1 $", ord("$"), 2),
        ("_x", ord("_"), 0),
        ("%", ord("%"), 0),
    ]
)
def test_unexpected_byte(source, byte, offset):
    with pytest.raises(UnexpectedByte) as exc:
        lex(source)
    assert exc.value.byte == byte
    assert exc.value.offset == offset


def test_unexpected_byte_display():
    assert str(UnexpectedByte(ord("%"))) == "unexpected byte '%'"
    assert str(UnexpectedByte(0xff)) == "unexpected byte 0xff"


def test_non_ascii_is_unexpected():
    with pytest.raises(UnexpectedByte) as exc:
        lex("é")
    assert exc.value.byte == 0xc3


def test_decode_reports_invalid_utf8():
    with pytest.raises(InvalidUtf8) as exc:
        Tokens(b"")._decode(b"\xc3", 7)
    assert exc.value.offset == 7
    assert str(exc.value) == "invalid utf-8"


@pytest.mark.parametrize("source", ["1.", "1.x", "-3. 4"])
def test_invalid_number(source):
    with pytest.raises(InvalidNumber):
        lex(source)


def test_invalid_number_display():
    with pytest.raises(InvalidNumber) as exc:
        lex("7.")
    assert str(exc.value) == "invalid number '7.'"


def test_peek_does_not_consume():
    tokens = Tokens("a b")
    assert tokens.peek() == Ident("a")
    assert tokens.peek() == Ident("a")
    assert tokens.next_token() == Ident("a")
    assert tokens.peek() == Ident("b")


def test_peek_at_end():
    tokens = Tokens("  # nothing here")
    assert tokens.peek() is None
    assert not tokens.has_more()
    assert tokens.next_token() is None


def test_restart_from_offset():
    assert list(Tokens("a b c", pos=2)) == [Ident("b"), Ident("c")]


def test_clone_is_independent():
    tokens = Tokens("1 2")
    copy = tokens.clone()
    next(tokens)
    assert next(copy) == Number(1)
    assert next(tokens) == Number(2)


def test_lazy_until_error():
    tokens = Tokens("1 @")
    assert next(tokens) == Number(1)
    with pytest.raises(UnexpectedByte):
        next(tokens)


def test_token_display():
    assert repr(Plus) == "Plus"
    assert repr(OpenBrace) == "OpenBrace"
    assert repr(Number(1)) == "Number(1.0)"
    assert str(Number(1)) == "1"
    assert str(Ident("x")) == "x"
    assert str(CloseBrace) == "}"
