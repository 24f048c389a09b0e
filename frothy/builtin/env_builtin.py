"""Built-in functions and constants for the Frothy runtime environment.

Builtins take no arguments on the stack: each reads what it needs from the
environment by name (``print`` reads ``print_arg``).
"""
from __future__ import annotations

import math

from frothy import FrothyValue
from frothy.types.environment import Environment
from frothy.types.nil import Nil
from frothy.types.value import render_value

PRINT_ARG = "print_arg"


def print_builtin(env: Environment) -> FrothyValue:
    """Print the rendering of `print_arg` on its own line; returns Nil."""
    print(render_value(env.lookup(PRINT_ARG)))
    return Nil


BUILTINS = {
    "print": print_builtin,
}

CONSTANTS = {
    "PI": math.pi,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    for name, callback in BUILTINS.items():
        env.define_builtin(name, callback)
    env.update(CONSTANTS)
