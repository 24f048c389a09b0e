import math

import pytest

from frothy.errors import UndefinedVariable, NotCallable, EvalError
from frothy.evaluation.evaluator import evaluate, evaluate_block, arithmetic
from frothy.types.ast import Literal, BinaryKind, Block, Func, Call, Ident, Assign
from frothy.types.nil import Nil
from frothy.types.value import Function, Builtin


# -----------------------------------------------------
# Node-level evaluation
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(Literal(1.0), env) == 1.0
    assert evaluate(Literal(True), env) is True
    assert evaluate(Literal(False), env) is False
    assert evaluate(Literal(Nil), env) is Nil


def test_identifier_lookup(env):
    env.define("x", 42.0)
    assert evaluate(Ident("x"), env) == 42.0
    with pytest.raises(UndefinedVariable) as exc:
        evaluate(Ident("z"), env)
    assert exc.value.name == "z"
    assert str(exc.value) == "undefined variable 'z'"


def test_assignment_returns_nil_and_binds(env):
    assert evaluate(Assign("x", Literal(5.0)), env) is Nil
    assert env.lookup("x") == 5.0
    evaluate(Assign("x", Literal(True)), env)
    assert env.lookup("x") is True


def test_func_builds_function_value(env):
    body = (Literal(1.0), Ident("y"))
    assert evaluate(Func(body), env) == Function(body)


def test_block_value_is_last_child(env):
    assert evaluate(Block((Literal(1.0), Literal(2.0))), env) == 2.0
    assert evaluate(Block(()), env) is Nil
    assert evaluate_block([], env) is Nil


def test_unknown_node_type(env):
    with pytest.raises(TypeError):
        evaluate(object(), env)


# -----------------------------------------------------
# Arithmetic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2 +", 3.0),
        ("10 4 -", 6.0),
        ("3 4 *", 12.0),
        ("10 4 /", 2.5),
        ("2 3 4 * +", 14.0),
        ("2 3 + 4 *", 20.0),
        ("-1 -2 -", 1.0),
        ("1.5 1.5 +", 3.0),
        ("1 0 /", math.inf),
        ("-1 0 /", -math.inf),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == [expected]


def test_zero_divided_by_zero_is_nan(run):
    (result,) = run("0 0 /")
    assert math.isnan(result)


def test_nan_propagates(run):
    (result,) = run("0 0 / 1 +")
    assert math.isnan(result)


@pytest.mark.parametrize(
    "source",
    [
        "true 1 +",
        "1 true +",
        "Nil 1 *",
        "true false -",
        "{1} fn 1 /",
        "print 1 +",
    ]
)
def test_type_mismatch_yields_nil(run, source):
    assert run(source) == [Nil]


def test_arithmetic_helper():
    assert arithmetic(BinaryKind.ADD, 1.0, 2.0) == 3.0
    assert arithmetic(BinaryKind.DIVIDE, True, 1.0) is Nil


def test_left_operand_is_evaluated_first(run):
    # both blocks assign x; the right one runs last
    assert run("{x 1 =} {x 2 =} + x") == [Nil, 2.0]


# -----------------------------------------------------
# Functions and calls
# -----------------------------------------------------

def test_function_construction_and_call(run):
    assert run("{1 2 +} fn call") == [3.0]


def test_empty_function_returns_nil(run):
    assert run("{} fn call") == [Nil]


def test_function_value(run):
    assert run("f {1} fn = f") == [Nil, Function((Literal(1.0),))]


def test_named_function_call(run):
    assert run("double {n n +} fn = n 4 = double call") == [Nil, Nil, 8.0]


def test_calls_resolve_names_at_call_time(run):
    # no closure: y is looked up when f runs, not when f is defined
    assert run("y 1 = f {y} fn = y 2 = f call") == [Nil, Nil, Nil, 2.0]
    assert run("f {y} fn = y 7 = f call") == [Nil, Nil, 7.0]


def test_function_body_assigns_globals(run):
    assert run("f {z 3 =} fn = f call z") == [Nil, Nil, 3.0]


def test_block_assignments_are_global(run):
    assert run("{a 1 =} a") == [Nil, 1.0]


def test_call_returns_value_of_last_expression(run):
    assert run("{1 2 3} fn call") == [3.0]


@pytest.mark.parametrize(
    "source,rendered",
    [
        ("1 call", "1"),
        ("true call", "true"),
        ("Nil call", "Nil"),
        ("{1} call", "1"),
        ("x 2.5 = x call", "2.5"),
    ]
)
def test_not_callable(run, source, rendered):
    with pytest.raises(NotCallable) as exc:
        run(source)
    assert exc.value.rendered == rendered
    assert str(exc.value) == f"value '{rendered}' is not callable"


def test_eval_errors_share_a_base_class(run):
    with pytest.raises(EvalError):
        run("missing")
    with pytest.raises(EvalError):
        run("1 call")


def test_call_node_with_builtin(env):
    seen = []
    env.define("spy", Builtin("spy", lambda e: seen.append(e) or 9.0))
    assert evaluate(Call(Ident("spy")), env) == 9.0
    assert seen == [env]


def test_functions_may_call_functions_defined_later(run):
    assert run("f {g call} fn = g {4} fn = f call") == [Nil, Nil, 4.0]


# -----------------------------------------------------
# Constants and variables
# -----------------------------------------------------

def test_pi(run):
    assert run("PI") == [math.pi]


def test_constants_can_be_reassigned(run):
    assert run("PI 3 = PI") == [Nil, 3.0]


def test_assign_then_read(run):
    assert run("x 5 = x") == [Nil, 5.0]


def test_undefined_variable(run):
    with pytest.raises(UndefinedVariable):
        run("x")

