"""Structural checks run on the raw expression before tokenization."""
import re
from typing import List

from scientific_calculator.common.errors import (
    ConsecutiveOperatorsError,
    EmptyExpressionError,
    EmptyFunctionCallError,
    MismatchedParenthesesError,
)

_OPERATOR_CHARS = "+-*/^%"

# Operator pairs that may precede a minus sign
_ALLOWED_PAIRS = frozenset({"*-", "/-", "+-", "--"})


def validate(expression: str) -> None:
    """
    Check an expression for structural mistakes.

    Checks run in a fixed order and the first failing one raises:
        1. Empty or whitespace-only input
        2. Balanced parentheses
        3. Operator placement
        4. Empty function calls

    :param str expression: Raw expression string

    :return: None
    :raises EmptyExpressionError: If the expression is empty
    :raises MismatchedParenthesesError: If parentheses are unbalanced
    :raises ConsecutiveOperatorsError: If two operators follow each other
    :raises EmptyFunctionCallError: If the expression contains ``()``
    """
    if expression is None or not expression.strip():
        raise EmptyExpressionError("Expression cannot be empty")

    _check_parentheses(expression)
    _check_operator_placement(expression)
    _check_function_calls(expression)


def _check_parentheses(expression: str) -> None:
    stack: List[str] = []
    for char in expression:
        if char == "(":
            stack.append(char)
        elif char == ")":
            if not stack:
                raise MismatchedParenthesesError("Mismatched parentheses")
            stack.pop()

    if stack:
        raise MismatchedParenthesesError("Mismatched parentheses")


def _check_operator_placement(expression: str) -> None:
    compact = re.sub(r"\s+", "", expression)
    for previous, current in zip(compact, compact[1:]):
        if previous in _OPERATOR_CHARS and current in _OPERATOR_CHARS:
            pair = previous + current
            if pair not in _ALLOWED_PAIRS:
                raise ConsecutiveOperatorsError(f"Consecutive operators: {pair}")


def _check_function_calls(expression: str) -> None:
    # Coarse check: neither the callee name nor the arity is inspected
    if "()" in expression:
        raise EmptyFunctionCallError("Empty function call")
