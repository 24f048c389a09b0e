"""Command-line runner: ``python -m frothy PATH``.

Reads a Frothy source file, evaluates it and prints either the list of
top-level values or the error's display text.
"""

import argparse
import logging
import sys

from frothy.config import get_recursion_limit, use_color
from frothy.debug_utils.pprint import pprint_ast, DEFAULT_OPTIONS
from frothy.errors import FrothyError
from frothy.interpreter import Interpreter
from frothy.reader.lexer import lex
from frothy.reader.parser import parse
from frothy.types.value import render_values


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frothy", description="Run a Frothy program.")
    parser.add_argument("path", help="file to interpret and run")
    parser.add_argument("--tokens", action="store_true", help="print the token stream instead of running")
    parser.add_argument("--ast", action="store_true", help="print the parsed forms instead of running")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(path: str, tokens: bool = False, ast: bool = False) -> None:
    try:
        with open(path, "rb") as f:
            program = f.read()
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return

    try:
        if tokens:
            print(" ".join(repr(t) for t in lex(program)))
        elif ast:
            print(pprint_ast(parse(program), {**DEFAULT_OPTIONS, "color": use_color()}))
        else:
            print(render_values(Interpreter().interpret(program)))
    except FrothyError as e:
        print(f"error: {e}", file=sys.stderr)


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        limit = get_recursion_limit()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 0
    if limit is not None:
        sys.setrecursionlimit(limit)

    run(args.path, tokens=args.tokens, ast=args.ast)
    return 0


if __name__ == "__main__":
    sys.exit(main())
