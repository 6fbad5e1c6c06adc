"""Operator table and token classification shared by the converter and the evaluator."""
from collections.abc import Callable as ABCCallable
import math
import operator
import re
from typing import Callable, Dict, Tuple

from scientific_calculator.common.errors import DivisionByZeroError


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Decimal literal, optionally signed, with optional exponent; plus the NaN and Infinity spellings
_NUMBER_RE = re.compile(r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and value % 2 == 1


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Division by zero")
    return a / b


def _remainder(a: float, b: float) -> float:
    # fmod raises where IEEE 754 gives NaN: zero divisor or infinite dividend
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            # Zero to a negative power; -0.0 keeps its sign for odd exponents
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        # Negative base with a non-integer exponent
        return math.nan


# Mapping of operator symbols to (precedence, function)
OPERATORS: Dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, _divide),
    "%": (2, _remainder),
    "^": (3, _power),
}

# Single characters the tokenizer always emits as their own token
DELIMITERS = frozenset("+-*/^%(),")


def is_operator(token: str) -> bool:
    return token in OPERATORS


def precedence(token: str) -> int:
    return OPERATORS[token][0]


def is_number(token: str) -> bool:
    """
    Determine if a token represents a numeric value.

    Accepts decimal integers and floating-point numbers with an optional sign and
    exponent (``12``, ``-8.9``, ``.5``, ``2.5E-3``), plus ``NaN`` and ``Infinity``.
    Other spellings Python's float() would take, such as ``inf`` or ``1_000``, are
    not numbers here.

    :param str token: Token string

    :return: True if token is a numeric literal, else False
    :rtype: bool
    """
    return _NUMBER_RE.fullmatch(token) is not None
