"""Application engine for Frothy.

Calls are dynamically scoped: a Function's body runs against the caller's
environment, and a Builtin receives that same environment.
"""

from __future__ import annotations

from frothy import FrothyValue
from frothy.errors import NotCallable
from frothy.types.environment import Environment
from frothy.types.value import Function, Builtin, render_value, to_value


def apply(fn: FrothyValue, env: Environment, evaluate_block) -> FrothyValue:
    """Invoke a callable value.

    Parameters:
    - fn: The value produced by the call target.
    - env: The environment in effect at the call site.
    - evaluate_block: Evaluator used to run a Function body.

    A Builtin's result is coerced with to_value. Raises NotCallable for
    numbers, booleans and Nil.
    """
    match fn:
        case Function(body=body):
            return evaluate_block(body, env)
        case Builtin(callback=callback):
            return to_value(callback(env))
    raise NotCallable(render_value(fn))
