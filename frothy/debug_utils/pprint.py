import json
from typing import Iterable

from frothy.types.ast import (
    Node,
    Literal,
    BinaryOp,
    Block,
    Func,
    Call,
    Ident,
    Assign,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_LITERAL = "\033[93m"
COLOR_OPERATOR = "\033[91m"
COLOR_IDENT = "\033[94m"
COLOR_KEYWORD = "\033[92m"
COLOR_BRACKET = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": 2,
    "max_depth": 32,
    "color": False,
    "show_rendering": False,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, options: dict = DEFAULT_OPTIONS) -> str:
    if options.get("color", False):
        return f"{color}{text}{RESET}"
    return text


def _label(node: Node, options: dict) -> str:
    match node:
        case Literal():
            return "Literal " + colorize(str(node), COLOR_LITERAL, options)
        case BinaryOp(kind=kind):
            return "BinaryOp " + colorize(kind.value, COLOR_OPERATOR, options)
        case Block():
            return colorize("Block", COLOR_BRACKET, options)
        case Func():
            return colorize("Func", COLOR_KEYWORD, options)
        case Call():
            return colorize("Call", COLOR_KEYWORD, options)
        case Ident(name=name):
            return "Ident " + colorize(name, COLOR_IDENT, options)
        case Assign(name=name):
            return "Assign " + colorize(name, COLOR_IDENT, options)
    return repr(node)


def _children(node: Node) -> tuple:
    match node:
        case BinaryOp(left=left, right=right):
            return (left, right)
        case Block(body=body) | Func(body=body):
            return body
        case Call(target=target):
            return (target,)
        case Assign(value=value):
            return (value,)
    return ()


# ----------------- Pretty printer -----------------
def pprint_node(node: Node, depth: int = 0, options: dict = DEFAULT_OPTIONS) -> list[str]:
    pad = " " * (options.get("indent", 2) * depth)
    line = pad + _label(node, options)
    if options.get("show_rendering", False) and _children(node):
        line += "  " + colorize(str(node), COLOR_BRACKET, options)
    lines = [line]
    children = _children(node)
    if not children:
        return lines
    if depth + 1 > options.get("max_depth", 32):
        lines.append(pad + " " * options.get("indent", 2) + "...")
        return lines
    for child in children:
        lines.extend(pprint_node(child, depth + 1, options))
    return lines


def pprint_ast(nodes: Iterable[Node], options: dict = DEFAULT_OPTIONS) -> str:
    """Indented tree view of a sequence of top-level forms."""
    lines = []
    for node in nodes:
        lines.extend(pprint_node(node, 0, options))
    return "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
