"""Tree-walking evaluator for Frothy.

Evaluation is plain recursion over the AST against one flat Environment.
There is no depth guard: a program that recurses without end exhausts the
Python stack and the resulting RecursionError is left to propagate.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from frothy import FrothyValue
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
from frothy.types.environment import Environment
from frothy.types.nil import Nil
from frothy.types.value import Function
from frothy.evaluation.apply import apply


def arithmetic(kind: BinaryKind, lhs: FrothyValue, rhs: FrothyValue) -> FrothyValue:
    """Combine two operands; anything but two numbers yields Nil."""
    if not (isinstance(lhs, float) and isinstance(rhs, float)):
        return Nil
    match kind:
        case BinaryKind.ADD:
            return lhs + rhs
        case BinaryKind.SUBTRACT:
            return lhs - rhs
        case BinaryKind.MULTIPLY:
            return lhs * rhs
        case BinaryKind.DIVIDE:
            # IEEE semantics: x/0 is +-inf and 0/0 is NaN rather than an exception
            with np.errstate(divide="ignore", invalid="ignore"):
                return float(np.float64(lhs) / np.float64(rhs))
    raise ValueError(f"unknown operator {kind!r}")


def evaluate_block(body: Iterable[Node], env: Environment) -> FrothyValue:
    """Evaluate nodes in order; the value of the last one, or Nil if empty."""
    result: FrothyValue = Nil
    for node in body:
        result = evaluate(node, env)
    return result


def evaluate(node: Node, env: Environment) -> FrothyValue:
    """Evaluate a single AST node."""
    match node:
        case Literal(value=value):
            return value
        case BinaryOp(kind=kind, left=left, right=right):
            # left is fully evaluated (side effects included) before right
            lhs = evaluate(left, env)
            rhs = evaluate(right, env)
            return arithmetic(kind, lhs, rhs)
        case Block(body=body):
            return evaluate_block(body, env)
        case Func(body=body):
            return Function(body)
        case Call(target=target):
            return apply(evaluate(target, env), env, evaluate_block)
        case Assign(name=name, value=value):
            env.define(name, evaluate(value, env))
            return Nil
        case Ident(name=name):
            return env.lookup(name)
    raise TypeError(f"cannot evaluate {node!r}")
