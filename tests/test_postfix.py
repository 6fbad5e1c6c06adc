"""Test functions evaluate_postfix and apply_operator."""
import math

import pytest

from scientific_calculator.common.errors import (
    DivisionByZeroError,
    FunctionCallError,
    InsufficientOperandsError,
    InvalidExpressionError,
    MissingFunctionArgumentError,
    UnknownTokenError,
)
from scientific_calculator.core.functions import FunctionRegistry
from scientific_calculator.core.postfix import apply_operator, evaluate_postfix


@pytest.fixture
def functions() -> FunctionRegistry:
    return FunctionRegistry.with_builtins()


@pytest.mark.parametrize("postfix,expected", [
    (["3", "4", "+"], 7.0),
    (["5", "2", "-"], 3.0),          # right operand is popped first
    (["8", "2", "/"], 4.0),
    (["2", "10", "^"], 1024.0),
    (["7", "2", "%"], 1.0),
    (["-7", "2", "%"], -1.0),        # remainder takes the sign of the dividend
    (["16", "sqrt", "100", "log", "2", "*", "+"], 8.0),
    (["2.1", "ceil"], 3.0),
    (["-2.1", "floor"], -3.0),
    (["42"], 42.0),
])
def test_evaluate_postfix_valid(postfix, expected, functions):
    """Evaluate returns correct result for valid postfix sequences."""
    result = evaluate_postfix(postfix, functions)
    assert result == expected
    assert isinstance(result, float)


def test_evaluate_postfix_records_steps(functions):
    """Each push and application is recorded with the stack state."""
    steps = []
    evaluate_postfix(["2", "3", "+", "cos"], functions, steps)
    assert steps == [
        "  Push 2 → Stack: [2.0]",
        "  Push 3 → Stack: [2.0, 3.0]",
        "  Apply 2.0 + 3.0 = 5.0",
        f"  Apply cos(5.0) = {math.cos(5.0)}",
    ]


@pytest.mark.parametrize("postfix,error", [
    (["4", "0", "/"], DivisionByZeroError),
    (["4", "0.0", "/"], DivisionByZeroError),
    (["+"], InsufficientOperandsError),
    (["2", "+"], InsufficientOperandsError),
    (["sin"], MissingFunctionArgumentError),
    (["1", "2"], InvalidExpressionError),
    ([], InvalidExpressionError),
    (["1", "foo", "2", "+"], UnknownTokenError),
])
def test_evaluate_postfix_invalid(postfix, error, functions):
    """Malformed sequences and undefined operations raise the matching error."""
    with pytest.raises(error):
        evaluate_postfix(postfix, functions)


def test_evaluate_postfix_lenient_skips_unknown_tokens(functions):
    """Without strict mode unknown tokens are ignored."""
    assert evaluate_postfix(["1", "foo", "2", "+"], functions, strict=False) == 3.0


def test_evaluate_postfix_custom_function():
    """Only functions of the given registry are applied."""
    registry = FunctionRegistry({"twice": lambda v: v * 2})
    assert evaluate_postfix(["21", "twice"], registry) == 42.0
    with pytest.raises(UnknownTokenError):
        evaluate_postfix(["0", "sin"], registry)


def test_apply_operator():
    """apply_operator computes a <op> b."""
    assert apply_operator("-", 1.0, 3.0) == -2.0
    assert apply_operator("^", 2.0, 0.5) == pytest.approx(math.sqrt(2))
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        apply_operator("/", 1.0, 0.0)


@pytest.mark.parametrize("postfix,expected", [
    (["1000", "exp"], math.inf),
    (["0", "ln"], -math.inf),
    (["0", "log"], -math.inf),
    (["0", "-1", "^"], math.inf),
    (["-0.0", "-1", "^"], -math.inf),
    (["10", "400", "^"], math.inf),
    (["-10", "401", "^"], -math.inf),
    (["1e308", "10", "*"], math.inf),
])
def test_evaluate_postfix_overflow_gives_infinity(postfix, expected, functions):
    """Out-of-range results are infinite, as with IEEE 754 doubles."""
    assert evaluate_postfix(postfix, functions) == expected


@pytest.mark.parametrize("postfix", [
    ["-1", "sqrt"],
    ["-1", "ln"],
    ["0", "0", "%"],
    ["Infinity", "2", "%"],
    ["-8", "0.5", "^"],
    ["Infinity", "sin"],
    ["NaN", "ceil"],
])
def test_evaluate_postfix_undefined_gives_nan(postfix, functions):
    """Undefined results are NaN instead of errors."""
    assert math.isnan(evaluate_postfix(postfix, functions))


def test_evaluate_postfix_wraps_failing_function():
    """Any failure of a registered function becomes a FunctionCallError."""
    def broken(value):
        raise RuntimeError("boom")

    registry = FunctionRegistry({"broken": broken, "cbrt": lambda v: v ** (1 / 3)})
    with pytest.raises(FunctionCallError, match="boom"):
        evaluate_postfix(["1", "broken"], registry)
    # A negative base gives a complex number
    with pytest.raises(FunctionCallError):
        evaluate_postfix(["-8", "cbrt"], registry)
