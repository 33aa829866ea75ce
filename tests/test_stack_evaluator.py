from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from adapters.expression_evaluator import StackExpressionEvaluator, bind, evaluate
from adapters.expression_evaluator.stack_evaluator import _Parser, _apply, max_safe_depth
from contracts import (
    EvalError,
    InsufficientOperands,
    MalformedExpression,
    MalformedNumber,
    NestingTooDeep,
    UnexpectedCharacter,
    UnknownOperator,
)
from ports.expression_evaluator import ExpressionEvaluator


def test_multiplication_binds_tighter_than_addition():
    assert evaluate("2+3*4", 0.0) == 14.0


def test_parentheses_override_precedence():
    assert evaluate("(2+3)*4", 0.0) == 20.0


def test_variable_is_substituted():
    assert evaluate("x*x", 3.0) == 9.0
    assert evaluate("x+1", -2.0) == -1.0


def test_same_precedence_is_left_associative():
    assert evaluate("8-3-2", 0.0) == 3.0
    assert evaluate("16/4/2", 0.0) == 2.0
    assert evaluate("2*6/3", 0.0) == 4.0


def test_whitespace_is_skipped():
    assert evaluate("  ( 1 +\t2 ) *\n x ", 2.0) == 6.0


def test_decimal_literals():
    assert evaluate("1.5*2", 0.0) == 3.0
    assert evaluate(".5+1.", 0.0) == 1.5
    assert evaluate("0.1+0.2", 0.0) == pytest.approx(0.3)


def test_nested_parentheses():
    assert evaluate("((1+2)*(3+4))", 0.0) == 21.0
    assert evaluate("(((x)))", 7.0) == 7.0


@pytest.mark.parametrize(
    "expression, x",
    [
        ("1+2*3-4/8", 0.0),
        ("x*x-2*x+1", 3.0),
        ("(x+1)*(x-1)/(x*x)", 2.5),
        ("10-(4-(3-(2-1)))", 0.0),
        ("x/4*2+x-3*x", -1.25),
        ("((2))*((3)+(4*(x)))", 0.5),
        ("100/x/x", 5.0),
    ],
)
def test_matches_reference_evaluation(expression, x):
    expected = eval(expression, {"__builtins__": {}}, {"x": x})

    assert evaluate(expression, x) == pytest.approx(expected)


def test_division_by_zero_follows_ieee754():
    assert evaluate("1/0", 0.0) == math.inf
    assert evaluate("0-1/0", 0.0) == -math.inf
    assert math.isnan(evaluate("0/0", 0.0))
    assert evaluate("1/(0*(0-1))", 0.0) == -math.inf


def test_non_finite_x_propagates():
    assert evaluate("x+1", math.inf) == math.inf
    assert math.isnan(evaluate("x*2", math.nan))


def test_evaluation_is_idempotent():
    evaluator = StackExpressionEvaluator()

    first = evaluator.evaluate("(x+3)/7*x", 1.75)
    second = evaluator.evaluate("(x+3)/7*x", 1.75)

    assert first == second


def test_dangling_operator_reports_insufficient_operands():
    with pytest.raises(InsufficientOperands) as excinfo:
        evaluate("2+", 0.0)

    assert excinfo.value.operator == "+"
    assert excinfo.value.code == "INSUFFICIENT_OPERANDS"


def test_unary_minus_is_not_supported():
    with pytest.raises(InsufficientOperands):
        evaluate("-1", 0.0)


def test_unknown_character_is_reported_with_position():
    with pytest.raises(UnexpectedCharacter) as excinfo:
        evaluate("2@3", 0.0)

    assert excinfo.value.char == "@"
    assert excinfo.value.position == 1


def test_functions_and_other_variables_are_rejected():
    with pytest.raises(UnexpectedCharacter) as excinfo:
        evaluate("sin(x)", 1.0)
    assert excinfo.value.char == "s"

    with pytest.raises(UnexpectedCharacter):
        evaluate("X+1", 1.0)

    with pytest.raises(UnexpectedCharacter):
        evaluate("2^3", 0.0)


def test_malformed_number():
    with pytest.raises(MalformedNumber) as excinfo:
        evaluate("1+1.2.3", 0.0)

    assert excinfo.value.literal == "1.2.3"
    assert excinfo.value.position == 2

    with pytest.raises(MalformedNumber):
        evaluate(".", 0.0)


@pytest.mark.parametrize("expression", ["", "   ", "()", "2 3", "2x", "2(3)"])
def test_value_stack_must_hold_exactly_one_value(expression):
    with pytest.raises(MalformedExpression):
        evaluate(expression, 1.0)


def test_unmatched_closing_parenthesis_ends_parse():
    assert evaluate("1+2)", 0.0) == 3.0
    assert evaluate("1+2)*100", 0.0) == 3.0


def test_unclosed_parenthesis_is_tolerated_by_default():
    assert evaluate("(1+2", 0.0) == 3.0


def test_strict_mode_rejects_unbalanced_parentheses():
    evaluator = StackExpressionEvaluator(strict_parentheses=True)

    with pytest.raises(UnexpectedCharacter) as excinfo:
        evaluator.evaluate("1+2)", 0.0)
    assert excinfo.value.char == ")"
    assert excinfo.value.position == 3

    with pytest.raises(MalformedExpression):
        evaluator.evaluate("(1+2", 0.0)

    assert evaluator.evaluate("((1+2)*(3+4))", 0.0) == 21.0


def test_nesting_limit_is_enforced():
    evaluator = StackExpressionEvaluator(max_depth=3)

    assert evaluator.evaluate("(((x)))", 2.0) == 2.0
    with pytest.raises(NestingTooDeep) as excinfo:
        evaluator.evaluate("((((x))))", 2.0)
    assert excinfo.value.limit == 3
    assert excinfo.value.position == 3


def test_default_limit_guards_against_deep_nesting():
    expression = "(" * 10_000 + "1" + ")" * 10_000

    with pytest.raises(NestingTooDeep):
        evaluate(expression, 0.0)


def test_negative_max_depth_is_rejected():
    with pytest.raises(ValueError):
        StackExpressionEvaluator(max_depth=-1)


def test_max_depth_beyond_interpreter_stack_is_rejected():
    with pytest.raises(ValueError):
        StackExpressionEvaluator(max_depth=100_000)

    evaluator = StackExpressionEvaluator(max_depth=max_safe_depth())
    depth = max_safe_depth()
    assert evaluator.evaluate("(" * depth + "x" + ")" * depth, 4.0) == 4.0


def test_recursion_error_surfaces_as_nesting_error(monkeypatch):
    def exhausted(self):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr(_Parser, "parse", exhausted)

    with pytest.raises(NestingTooDeep) as excinfo:
        StackExpressionEvaluator(max_depth=50).evaluate("((1))", 0.0)
    assert excinfo.value.limit == 50


def test_overflow_saturates_to_infinity():
    assert evaluate("x*10", 1e308) == math.inf
    assert evaluate("x/0.1", -1e308) == -math.inf
    assert evaluate("x+x", 1.7e308) == math.inf


def test_all_errors_share_base_class():
    for expression in ("2+", "2@3", "1..2", "()"):
        with pytest.raises(EvalError):
            evaluate(expression, 0.0)


def test_bind_returns_plain_function():
    f = bind("x*x+1")

    assert f(0.0) == 1.0
    assert f(3.0) == 10.0


def test_evaluator_satisfies_protocol():
    assert isinstance(StackExpressionEvaluator(), ExpressionEvaluator)


def test_concurrent_calls_are_independent():
    evaluator = StackExpressionEvaluator()
    xs = [float(i) for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda x: evaluator.evaluate("(x+1)*(x-1)", x), xs))

    assert results == [x * x - 1 for x in xs]


def test_apply_rejects_unknown_operator():
    with pytest.raises(UnknownOperator) as excinfo:
        _apply("^", [2.0, 3.0])

    assert excinfo.value.code == "UNKNOWN_OPERATOR"
