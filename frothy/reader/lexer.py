"""
  Frothy Lexer

- Scans raw source bytes, one token at a time
- Lazy: tokens are only produced when asked for
- Restartable: a stream can be cloned or started at any byte offset
- Cheap peek, so the parser can look at a '}' before consuming it

Tokens carry no position; the stream's ``pos`` is the only location
information, and lexer errors record it as their ``offset``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from frothy.errors import UnexpectedByte, InvalidNumber, InvalidUtf8
from frothy.types.ast import render_number


class TokenType(Enum):
    IDENT = "ident"
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    ASSIGN = "="
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: object = None

    def __str__(self) -> str:
        if self.type is TokenType.IDENT:
            return str(self.value)
        if self.type is TokenType.NUMBER:
            return render_number(self.value)
        return self.type.value

    def __repr__(self) -> str:
        if self.type is TokenType.IDENT:
            return f"Ident({self.value!r})"
        if self.type is TokenType.NUMBER:
            return f"Number({self.value!r})"
        return self.type.name.title().replace("_", "")


def Ident(text: str) -> Token:
    return Token(TokenType.IDENT, text)


def Number(value: float) -> Token:
    return Token(TokenType.NUMBER, float(value))


Plus = Token(TokenType.PLUS)
Minus = Token(TokenType.MINUS)
Multiply = Token(TokenType.MULTIPLY)
Divide = Token(TokenType.DIVIDE)
OpenBrace = Token(TokenType.OPEN_BRACE)
CloseBrace = Token(TokenType.CLOSE_BRACE)
Assign = Token(TokenType.ASSIGN)
OpenParen = Token(TokenType.OPEN_PAREN)
CloseParen = Token(TokenType.CLOSE_PAREN)

SINGLE_BYTE_TOKENS: dict[int, Token] = {
    ord("+"): Plus,
    ord("*"): Multiply,
    ord("/"): Divide,
    ord("{"): OpenBrace,
    ord("}"): CloseBrace,
    ord("="): Assign,
    ord("("): OpenParen,
    ord(")"): CloseParen,
}

WHITESPACE = frozenset(b" \t\n\r\x0c")
DIGITS = frozenset(b"0123456789")
LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
IDENT_TAIL = LETTERS | DIGITS | frozenset(b"_")

MINUS = ord("-")
DOT = ord(".")
COMMENT = ord("#")
NEWLINE = ord("\n")


class Tokens:
    """Token stream over a Frothy program.

    Iterating yields tokens until the input is exhausted. ``peek`` returns the
    next token without consuming it (or None at the end), and ``has_more``
    reports whether any token is left, so end of input never has to be
    signalled with an error.
    """

    __slots__ = ("input", "pos")

    def __init__(self, source: str | bytes, pos: int = 0):
        self.input: bytes = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        self.pos: int = pos

    def clone(self) -> Tokens:
        return Tokens(self.input, self.pos)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    # ----------------------
    # Byte helpers
    # ----------------------
    def _peek_byte(self, ahead: int = 0) -> Optional[int]:
        i = self.pos + ahead
        if i < len(self.input):
            return self.input[i]
        return None

    def _next_byte_while(self, allowed: frozenset) -> bytes:
        start = self.pos
        n = len(self.input)
        while self.pos < n and self.input[self.pos] in allowed:
            self.pos += 1
        return self.input[start:self.pos]

    def _skip_trivia(self) -> None:
        n = len(self.input)
        while self.pos < n:
            b = self.input[self.pos]
            if b in WHITESPACE:
                self.pos += 1
            elif b == COMMENT:
                # line comment: everything up to (not including) the newline
                while self.pos < n and self.input[self.pos] != NEWLINE:
                    self.pos += 1
            else:
                break

    # ----------------------
    # Public stream API
    # ----------------------
    def has_more(self) -> bool:
        """True if another token (or lex error) follows the current position."""
        self._skip_trivia()
        return self.pos < len(self.input)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it; None at end of input."""
        return self.clone().next_token()

    def next_token(self) -> Optional[Token]:
        """Consume and return the next token; None at end of input."""
        self._skip_trivia()
        b = self._peek_byte()
        if b is None:
            return None

        if b == MINUS:
            # a '-' directly followed by a digit starts a negative number
            nxt = self._peek_byte(1)
            if nxt is not None and nxt in DIGITS:
                return self._next_number()
            self.pos += 1
            return Minus

        if b in DIGITS:
            return self._next_number()

        if b in LETTERS:
            return self._next_ident()

        token = SINGLE_BYTE_TOKENS.get(b)
        if token is not None:
            self.pos += 1
            return token

        raise UnexpectedByte(b, self.pos)

    # ----------------------
    # Multi-byte tokens
    # ----------------------
    def _decode(self, span: bytes, start: int) -> str:
        # number and identifier spans are ASCII-only, so the lexer itself
        # never reaches InvalidUtf8; non-ASCII bytes fail earlier as
        # UnexpectedByte
        try:
            return span.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUtf8(start) from None

    def _next_number(self) -> Token:
        start = self.pos
        if self._peek_byte() == MINUS:
            self.pos += 1
        self._next_byte_while(DIGITS)
        if self._peek_byte() == DOT:
            self.pos += 1
            if not self._next_byte_while(DIGITS):
                raise InvalidNumber(self._decode(self.input[start:self.pos], start), start)
        text = self._decode(self.input[start:self.pos], start)
        try:
            return Number(float(text))
        except ValueError:
            raise InvalidNumber(text, start) from None

    def _next_ident(self) -> Token:
        start = self.pos
        self.pos += 1
        self._next_byte_while(IDENT_TAIL)
        return Ident(self._decode(self.input[start:self.pos], start))


def lex(source: str | bytes) -> list[Token]:
    """Tokenize a whole program eagerly."""
    return list(Tokens(source))
