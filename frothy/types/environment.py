"""Runtime environment for Frothy.

A single flat namespace: one mapping from names to values, no outer frames,
no shadowing. Assignment anywhere in a program mutates this mapping.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

from frothy import BuiltinFn, FrothyValue
from frothy.errors import UndefinedVariable
from frothy.types.value import Builtin, render_value

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from names to Frothy values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[str, FrothyValue] | None = None):
        self.vars: dict[str, FrothyValue] = dict(bindings) if bindings else {}

    def define(self, name: str, value: FrothyValue) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        self.vars[name] = value

    def define_builtin(self, name: str, callback: BuiltinFn) -> None:
        """Bind `name` to a Builtin wrapping `callback`."""
        if name in self.vars:
            logger.debug("Overwriting binding %s with builtin", name)
        self.define(name, Builtin(name, callback))

    def lookup(self, name: str) -> FrothyValue:
        """Look up the value bound to `name`.

        Raises UndefinedVariable if the name is unbound.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def update(self, mapping: dict[str, FrothyValue]) -> None:
        """Bulk-define a mapping of name -> value."""
        self.vars.update(mapping)

    def copy(self) -> Environment:
        """A new environment holding the same bindings."""
        return Environment(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {render_value(v)}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
