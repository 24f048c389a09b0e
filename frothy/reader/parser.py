"""
  Frothy Parser

Reduces the token stream on an operand stack:

- literals and identifiers are pushed
- operators pop their operands (deeper = left, top = right) and push the result
- '{' ... '}' and '(' ... ')' are parsed recursively, each in a fresh stack
  frame, so nodes pushed before the opening bracket are out of reach

What remains on the stack at the end of input is the program: one node per
top-level form, in source order.
"""

from __future__ import annotations

import logging
from typing import Callable

from frothy.errors import (
    NotEnoughOperands,
    UnexpectedToken,
    UnexpectedEndOfInput,
    ExpectedCloseBrace,
    ExpectedCloseParen,
    ExpectedSingleExpression,
    ExpectedBlock,
    ExpectedIdentAndValue,
)
from frothy.reader.lexer import Tokens, Token, TokenType
from frothy.types.ast import (
    Node,
    Literal,
    BinaryOp,
    BinaryKind,
    Block,
    Func,
    Call,
    Ident,
    Assign,
)
from frothy.types.nil import Nil

logger = logging.getLogger(__name__)


BINARY_OPS: dict[TokenType, BinaryKind] = {
    TokenType.PLUS: BinaryKind.ADD,
    TokenType.MINUS: BinaryKind.SUBTRACT,
    TokenType.MULTIPLY: BinaryKind.MULTIPLY,
    TokenType.DIVIDE: BinaryKind.DIVIDE,
}

KEYWORD_LITERALS: dict[str, Literal] = {
    "true": Literal(True),
    "false": Literal(False),
    "Nil": Literal(Nil),
}

RESERVED_WORDS = frozenset({"fn", "call"}) | frozenset(KEYWORD_LITERALS)


class Parser:
    """Parse a Frothy program into a list of AST nodes."""

    def __init__(self, source: str | bytes | Tokens):
        self.tokens: Tokens = source if isinstance(source, Tokens) else Tokens(source)
        self.stack: list[Node] = []
        self.keywords: dict[str, Callable[[], None]] = {
            "fn": self.parse_fn,
            "call": self.parse_call,
        }

    def parse(self) -> list[Node]:
        """Parse until end of input and return the top-level forms."""
        while self.tokens.has_more():
            self.parse_next()
        logger.debug("parsed %d top-level forms", len(self.stack))
        return self.stack

    # ------------------------
    # Single reduction step
    # ------------------------
    def parse_next(self) -> None:
        token = self.tokens.next_token()
        if token is None:
            raise UnexpectedEndOfInput(self.tokens.pos)

        kind = token.type
        if kind in BINARY_OPS:
            self.parse_binary(BINARY_OPS[kind])
        elif kind is TokenType.NUMBER:
            self.stack.append(Literal(token.value))
        elif kind is TokenType.IDENT:
            self.parse_ident(token.value)
        elif kind is TokenType.OPEN_BRACE:
            self.parse_block()
        elif kind is TokenType.OPEN_PAREN:
            self.parse_group()
        elif kind is TokenType.ASSIGN:
            self.parse_assign()
        else:
            raise UnexpectedToken(token, self.tokens.pos)

    def parse_binary(self, kind: BinaryKind) -> None:
        available = len(self.stack)
        if available < 2:
            raise NotEnoughOperands(2, available, self.tokens.pos)
        right = self.stack.pop()
        left = self.stack.pop()
        self.stack.append(BinaryOp(kind, left, right))

    def parse_ident(self, name: str) -> None:
        keyword = self.keywords.get(name)
        if keyword is not None:
            keyword()
        elif name in KEYWORD_LITERALS:
            self.stack.append(KEYWORD_LITERALS[name])
        else:
            self.stack.append(Ident(name))

    # ------------------------
    # Bracketed forms
    # ------------------------
    def parse_until(self, closer: TokenType, unterminated) -> list[Node]:
        """Parse units in a fresh stack frame until `closer`, which is consumed."""
        outer, self.stack = self.stack, []
        try:
            while True:
                if not self.tokens.has_more():
                    raise unterminated(self.tokens.pos)
                token: Token | None = self.tokens.peek()
                if token is not None and token.type is closer:
                    self.tokens.next_token()
                    return self.stack
                self.parse_next()
        finally:
            self.stack = outer

    def parse_block(self) -> None:
        # { <ast>* }
        body = self.parse_until(TokenType.CLOSE_BRACE, ExpectedCloseBrace)
        self.stack.append(Block(tuple(body)))

    def parse_group(self) -> None:
        # ( <ast> ) must reduce to exactly one node
        body = self.parse_until(TokenType.CLOSE_PAREN, ExpectedCloseParen)
        if len(body) != 1:
            raise ExpectedSingleExpression(len(body), self.tokens.pos)
        self.stack.append(body[0])

    # ------------------------
    # Keywords
    # ------------------------
    def parse_fn(self) -> None:
        # { <asts> } fn
        node = self.stack.pop() if self.stack else None
        if not isinstance(node, Block):
            raise ExpectedBlock(self.tokens.pos)
        self.stack.append(Func(node.body))

    def parse_call(self) -> None:
        # <ast> call
        if not self.stack:
            raise NotEnoughOperands(1, 0, self.tokens.pos)
        self.stack.append(Call(self.stack.pop()))

    def parse_assign(self) -> None:
        # <ident> <ast> =
        value = self.stack.pop() if self.stack else None
        target = self.stack.pop() if self.stack else None
        if value is None or not isinstance(target, Ident):
            raise ExpectedIdentAndValue(self.tokens.pos)
        self.stack.append(Assign(target.name, value))


def parse(source: str | bytes) -> list[Node]:
    """Parse a whole program into its top-level forms."""
    return Parser(source).parse()
