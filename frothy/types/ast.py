"""AST node types produced by the parser and walked by the evaluator.

Nodes are frozen dataclasses and bodies are tuples, so a node is a value: a
Function built from a ``Func`` node owns its body outright.

``str(node)`` is the canonical postfix rendering, fully parenthesised so that
it parses back to an equal tree::

    (1 2 +)   {a b}   ({x print_arg =} fn)   (f call)   (x 5 =)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

import numpy as np

from frothy.types.nil import Nil, NilType


def render_number(n: float) -> str:
    """Shortest positional form, without a trailing '.0' for whole numbers."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    return np.format_float_positional(n, trim="-")


def render_literal(value: Union[bool, float, NilType]) -> str:
    if value is Nil:
        return "Nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    return render_number(value)


class BinaryKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True, eq=False)
class Literal:
    value: Union[bool, float, NilType]

    # true == 1.0 in Python; a literal's type is part of its identity
    def _key(self):
        return type(self.value), self.value

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        return render_literal(self.value)


@dataclass(frozen=True)
class BinaryOp:
    kind: BinaryKind
    left: Node
    right: Node

    def __str__(self) -> str:
        return f"({self.left} {self.right} {self.kind.value})"


@dataclass(frozen=True)
class Block:
    body: tuple[Node, ...] = ()

    def __str__(self) -> str:
        return "{" + " ".join(str(node) for node in self.body) + "}"


@dataclass(frozen=True)
class Func:
    body: tuple[Node, ...] = ()

    def __str__(self) -> str:
        return "({" + " ".join(str(node) for node in self.body) + "} fn)"


@dataclass(frozen=True)
class Call:
    target: Node

    def __str__(self) -> str:
        return f"({self.target} call)"


@dataclass(frozen=True)
class Ident:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Assign:
    name: str
    value: Node

    def __str__(self) -> str:
        return f"({self.name} {self.value} =)"


Node = Union[Literal, BinaryOp, Block, Func, Call, Ident, Assign]


def render(nodes: Iterable[Node]) -> str:
    """Render a sequence of top-level forms, one space apart."""
    return " ".join(str(node) for node in nodes)
