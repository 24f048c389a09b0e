"""Runtime values.

Numbers are Python floats, booleans are bools and Nil is the Nil sentinel.
The two callable kinds get their own classes below.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field

from frothy import BuiltinFn, FrothyValue
from frothy.errors import ForeignValue
from frothy.types.ast import Node, render_number
from frothy.types.nil import Nil


@dataclass(frozen=True)
class Function:
    """A user function: the body of a ``{...} fn`` expression.

    Holds no environment. Free names in the body are resolved against the
    environment in effect when the function is called.
    """

    body: tuple[Node, ...]

    def __str__(self) -> str:
        return "<fn>"


@dataclass(frozen=True)
class Builtin:
    """A host-provided callable, invoked with the calling environment."""

    name: str
    callback: BuiltinFn = field(compare=False)

    def __str__(self) -> str:
        return f"<builtin-fn:{self.name}>"


def to_value(obj) -> FrothyValue:
    """Coerce a host object into a runtime value.

    Any real number other than a bool becomes a float. Raises ForeignValue
    for objects with no Frothy counterpart.
    """
    match obj:
        case bool() | float() | Function() | Builtin():
            return obj
        case numbers.Real():
            return float(obj)
        case _ if obj is Nil:
            return obj
    raise ForeignValue(obj)


def render_value(value: FrothyValue) -> str:
    """Display text of a runtime value."""
    match value:
        case bool():
            return "true" if value else "false"
        case float():
            return render_number(value)
        case Function() | Builtin():
            return str(value)
        case _ if value is Nil:
            return "Nil"
    raise TypeError(f"not a Frothy value: {value!r}")


def render_values(values) -> str:
    return "[" + ", ".join(render_value(v) for v in values) + "]"
