"""Frothy interpreter: lex, parse and evaluate whole programs.

An Interpreter holds the globals every program starts with (builtins and
constants). Each call to ``interpret`` evaluates against a fresh copy of
them, so one program's assignments never leak into the next.
"""

from __future__ import annotations

import logging

from frothy import BuiltinFn, FrothyValue
from frothy.builtin.env_builtin import register
from frothy.evaluation.evaluator import evaluate as evaluate_node
from frothy.reader.parser import Parser
from frothy.types.environment import Environment
from frothy.types.value import to_value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates Frothy programs.
    Builtins are registered when the interpreter is created; more can be
    added with ``register_builtin`` before programs are run.
    """

    def __init__(self, builtins: dict[str, BuiltinFn] | None = None):
        self.globals: Environment = Environment()
        register(self.globals)
        for name, callback in (builtins or {}).items():
            self.register_builtin(name, callback)

    def register_builtin(self, name: str, callback: BuiltinFn) -> None:
        """Expose `callback` to programs as `name`.

        The callback receives the calling Environment and returns a value;
        it signals failure by raising a FrothyError.
        """
        logger.debug("registering builtin %s", name)
        self.globals.define_builtin(name, callback)

    def define_constant(self, name: str, value: FrothyValue) -> None:
        # ints and other reals are stored as floats
        self.globals.define(name, to_value(value))

    def new_environment(self) -> Environment:
        return self.globals.copy()

    def interpret(self, source: str | bytes) -> list[FrothyValue]:
        """Evaluate a program, returning the value of each top-level form.

        The first error aborts the whole program; values of forms evaluated
        before it are discarded.
        """
        nodes = Parser(source).parse()
        env = self.new_environment()
        results = [evaluate_node(node, env) for node in nodes]
        logger.debug("evaluated %d forms", len(results))
        return results


def evaluate(source: str | bytes) -> list[FrothyValue]:
    """Evaluate a program with a default interpreter."""
    return Interpreter().interpret(source)
