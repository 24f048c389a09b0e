"""Exception hierarchy for the Frothy interpreter.

Every error raised by lexing, parsing or evaluation derives from FrothyError;
``str(error)`` is the display text shown to users.
"""

from __future__ import annotations


class FrothyError(Exception):
    """ Base class for all Frothy errors"""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.message = message
        # byte offset into the source, when known
        self.offset = offset

    def __str__(self) -> str:
        return self.message


# -------------------------------
# Lexing
# -------------------------------
class LexError(FrothyError):
    """ Raised when the source cannot be split into tokens"""


class UnexpectedByte(LexError):
    """ Raised on a byte that starts no token"""

    def __init__(self, byte: int, offset: int | None = None):
        if byte < 0x80:
            shown = f"'{chr(byte)}'"
        else:
            shown = f"0x{byte:02x}"
        super().__init__(f"unexpected byte {shown}", offset)
        self.byte = byte


class InvalidUtf8(LexError):
    """ Raised when an identifier or number span is not valid UTF-8"""

    def __init__(self, offset: int | None = None):
        super().__init__("invalid utf-8", offset)


class InvalidNumber(LexError):
    """ Raised on a malformed digit run"""

    def __init__(self, text: str, offset: int | None = None):
        super().__init__(f"invalid number '{text}'", offset)
        self.text = text


# -------------------------------
# Parsing
# -------------------------------
class ParseError(FrothyError):
    """ Raised when the token stream does not reduce to a program"""


class UnexpectedToken(ParseError):
    def __init__(self, token, offset: int | None = None):
        super().__init__(f"unexpected token '{token}'", offset)
        self.token = token


class UnexpectedEndOfInput(ParseError):
    def __init__(self, offset: int | None = None):
        super().__init__("unexpected EOI", offset)


class ExpectedCloseBrace(ParseError):
    def __init__(self, offset: int | None = None):
        super().__init__("expected }", offset)


class ExpectedCloseParen(ParseError):
    def __init__(self, offset: int | None = None):
        super().__init__("expected )", offset)


class ExpectedSingleExpression(ParseError):
    """ Raised when a parenthesised group does not reduce to exactly one node"""

    def __init__(self, count: int, offset: int | None = None):
        super().__init__(f"expected 1 expression in group but got {count}", offset)
        self.count = count


class ExpectedBlock(ParseError):
    def __init__(self, offset: int | None = None):
        super().__init__("expected block", offset)


class ExpectedIdentAndValue(ParseError):
    def __init__(self, offset: int | None = None):
        super().__init__("expected ident + ast", offset)


# -------------------------------
# Evaluation
# -------------------------------
class EvalError(FrothyError):
    """ Raised when a well-formed program fails at runtime"""


class UndefinedVariable(EvalError):
    def __init__(self, name: str):
        super().__init__(f"undefined variable '{name}'")
        self.name = name


class NotCallable(EvalError):
    def __init__(self, rendered: str):
        super().__init__(f"value '{rendered}' is not callable")
        self.rendered = rendered


# -------------------------------
# Arity
# -------------------------------
class ArityError(FrothyError):
    """ Raised when an operator finds too few operands"""


class NotEnoughOperands(ArityError):
    def __init__(self, required: int, available: int, offset: int | None = None):
        super().__init__(
            f"expected {required} arguments but got {available}", offset
        )
        self.required = required
        self.available = available


class ForeignValue(EvalError):
    """ Raised when the host hands the interpreter something that is not a value"""

    def __init__(self, obj):
        super().__init__(f"not a Frothy value: {obj!r}")
        self.obj = obj
