from __future__ import annotations

"""
Lightweight indexer for Frothy files without evaluating code.

We replay the parser's stack discipline over the token stream, keeping only
enough structure to find assignments (`name value =`) and where they are:
- definitions: `x 5 =` is a var, `f {...} fn =` is a function
- the first lex/parse error, reported by the real parser, with its position

The scan is tolerant: operator underflow or stray brackets are skipped so a
half-typed buffer still yields an index.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from frothy.errors import FrothyError, LexError
from frothy.reader.lexer import Tokens, TokenType
from frothy.reader.parser import parse, BINARY_OPS, KEYWORD_LITERALS


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class ParseProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    references: List[Tuple[str, int, int]] = field(default_factory=list)
    error: Optional[ParseProblem] = None


@dataclass
class _Entry:
    kind: str  # "ident" | "value" | "block" | "function" | "marker"
    name: Optional[str] = None
    offset: int = 0


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # byte offset -> (line, col), 0-based, col counted in characters
    prefix = text.encode("utf-8")[:offset].decode("utf-8", errors="ignore")
    line = prefix.count("\n")
    last_nl = prefix.rfind("\n")
    col = len(prefix) if last_nl == -1 else len(prefix) - last_nl - 1
    return line, col


def _iter_tokens(text: str):
    """Yield (token, start_offset); stops quietly at the first lex error."""
    tokens = Tokens(text)
    while True:
        try:
            if not tokens.has_more():
                return
            start = tokens.pos
            token = tokens.next_token()
        except LexError:
            return
        yield token, start


def _collapse(stack: List[_Entry]) -> List[_Entry]:
    """Pop entries down to the nearest marker; return them in order."""
    body: List[_Entry] = []
    while stack and stack[-1].kind != "marker":
        body.append(stack.pop())
    if stack:
        stack.pop()
    body.reverse()
    return body


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    stack: List[_Entry] = []

    for token, start in _iter_tokens(text):
        kind = token.type
        if kind is TokenType.IDENT:
            name = token.value
            if name == "fn":
                top = stack.pop() if stack else None
                stack.append(_Entry("function" if top and top.kind == "block" else "value"))
            elif name == "call":
                if stack:
                    stack.pop()
                stack.append(_Entry("value"))
            elif name in KEYWORD_LITERALS:
                stack.append(_Entry("value"))
            else:
                line, col = _position_from_offset(text, start)
                idx.references.append((name, line, col))
                stack.append(_Entry("ident", name, start))
        elif kind is TokenType.NUMBER:
            stack.append(_Entry("value"))
        elif kind in BINARY_OPS:
            del stack[-2:]
            stack.append(_Entry("value"))
        elif kind in (TokenType.OPEN_BRACE, TokenType.OPEN_PAREN):
            stack.append(_Entry("marker"))
        elif kind is TokenType.CLOSE_BRACE:
            _collapse(stack)
            stack.append(_Entry("block"))
        elif kind is TokenType.CLOSE_PAREN:
            body = _collapse(stack)
            stack.append(body[0] if len(body) == 1 else _Entry("value"))
        elif kind is TokenType.ASSIGN:
            value = stack.pop() if stack else None
            target = stack.pop() if stack else None
            if value is not None and target is not None and target.kind == "ident":
                line, col = _position_from_offset(text, target.offset)
                sym_kind = "function" if value.kind == "function" else "var"
                idx.symbols.setdefault(target.name, SymbolDef(target.name, sym_kind, line, col))
            stack.append(_Entry("value"))

    try:
        parse(text)
    except FrothyError as e:
        line, col = _position_from_offset(text, e.offset or 0)
        idx.error = ParseProblem(str(e), line, col)

    return idx


# Builtin signatures for quick hover without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "print": "print_arg <value> = print call  ; prints print_arg, returns Nil",
    "PI": "PI  ; constant 3.141592653589793",
}

RESERVED_WORDS: Dict[str, str] = {
    "fn": "{ ... } fn  ; turn a block into a function value",
    "call": "<f> call  ; call a function or builtin",
    "true": "boolean literal",
    "false": "boolean literal",
    "Nil": "the Nil literal",
}


def unassigned_references(idx: DocumentIndex) -> List[Tuple[str, int, int]]:
    """References to names the document never assigns and no builtin provides."""
    return [
        ref for ref in idx.references
        if ref[0] not in idx.symbols and ref[0] not in BUILTIN_SIGNATURES
    ]
