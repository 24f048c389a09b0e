from timeit import timeit

from frothy.interpreter import Interpreter
from frothy.types.environment import Environment
from frothy.reader.lexer import lex
from frothy.reader.parser import parse
from frothy.evaluation.evaluator import evaluate_block


def time_lexer(code: str, rounds: int) -> float:
    return timeit(lambda: lex(code), number=rounds)


def time_parser(code: str, rounds: int) -> float:
    """Lex and parse, no evaluation."""
    return timeit(lambda: parse(code), number=rounds)


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: parses once, then re-runs the same forms
    against a fresh environment each round.
    """
    itp = Interpreter()
    nodes = parse(code)
    # Warmup
    evaluate_block(nodes, itp.new_environment())
    # Timed
    return timeit(lambda: evaluate_block(nodes, itp.new_environment()), number=rounds)


def bench_lookup(n_bindings: int = 1000, n_lookups: int = 100000) -> float:
    env = Environment({f"v{i}": float(i) for i in range(n_bindings)})
    # Warmup
    for _ in range(1000):
        env.lookup("v500")
    return timeit(lambda: env.lookup("v500"), number=n_lookups)


ARITH_CODE = "1 2 + 3 4 + * 5 6 - / " * 20

FUNCTION_CALL_CODE = r"""
add {a b +} fn =
a 1 = b 2 =
add call add call add call add call add call
"""

# functions calling functions, resolved at call time
CHAIN_CODE = r"""
f0 {n 1 +} fn =
f1 {f0 call f0 call +} fn =
f2 {f1 call f1 call +} fn =
f3 {f2 call f2 call +} fn =
n 1 =
f3 call
"""

NESTED_BLOCKS_CODE = "{" * 50 + "1" + "}" * 50


def _print_stages(name: str, code: str, rounds: int) -> None:
    tlex = time_lexer(code, rounds)
    tparse = time_parser(code, rounds)
    teval = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  lex: {tlex:.6f}s  |  lex+parse: {tparse:.6f}s  |  eval only: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup")
    print(f"  time: {bench_lookup():.6f}s")

    _print_stages("arithmetic", ARITH_CODE, rounds=2000)
    _print_stages("function calls", FUNCTION_CALL_CODE, rounds=5000)
    _print_stages("call chain", CHAIN_CODE, rounds=2000)
    _print_stages("nested blocks", NESTED_BLOCKS_CODE, rounds=2000)
