# Core type aliases for Frothy's data model.
# Runtime values are plain Python objects: float for numbers, bool for booleans,
# the Nil sentinel, and the Function / Builtin wrappers from frothy.types.value.
#
# Naming guidance:
# - Node:  Use in reader/parser code to denote AST nodes (frothy.types.ast).
# - FrothyValue: Use in evaluator/runtime code to denote evaluated values.

import logging
from typing import Any, Callable

# Runtime value alias
FrothyValue = Any

# Native callback signature: receives the environment, returns a value
BuiltinFn = Callable[..., FrothyValue]

logging.getLogger("frothy").addHandler(logging.NullHandler())
