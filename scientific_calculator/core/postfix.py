"""Stack-based evaluation of postfix token sequences."""
from typing import List, Optional

from scientific_calculator.common.errors import (
    FunctionCallError,
    InsufficientOperandsError,
    InvalidExpressionError,
    MissingFunctionArgumentError,
    UnknownTokenError,
)
from scientific_calculator.common.logger import logger
from scientific_calculator.core.functions import FunctionRegistry, UnaryFn
from scientific_calculator.core.operators import OPERATORS, is_number, is_operator


def _format_stack(stack: List[float]) -> str:
    return "[" + ", ".join(str(value) for value in stack) + "]"


def call_function(name: str, fn: UnaryFn, arg: float) -> float:
    """
    Apply a registered function to one argument.

    Built-in functions follow IEEE 754 and never raise: ``sqrt(-1)`` is NaN and
    ``ln(0)`` is -inf. Whatever a user-registered function raises, or a result that
    is not a real number (e.g. complex), becomes a FunctionCallError.

    :param str name: Function name, used in the error message
    :param UnaryFn fn: Registered function
    :param float arg: Argument popped from the stack

    :return: Result as float
    :rtype: float
    :raises FunctionCallError: If the function raises or returns a non-real value
    """
    try:
        return float(fn(arg))
    except Exception as exc:
        raise FunctionCallError(f"Function {name}({arg}) failed: {exc}") from exc


def apply_operator(symbol: str, a: float, b: float) -> float:
    """
    Apply the binary operator ``a <symbol> b`` with IEEE 754 semantics.

    Undefined results are NaN (``0 % 0``) and out-of-range results are infinite
    (``0 ^ -1``, ``10 ^ 400``); only division by zero raises.

    :param str symbol: One of ``+ - * / ^ %``
    :param float a: Left operand
    :param float b: Right operand

    :return: Result of the operation
    :rtype: float
    :raises DivisionByZeroError: If symbol is ``/`` and b is zero
    """
    return float(OPERATORS[symbol][1](a, b))


def evaluate_postfix(
    postfix: List[str],
    functions: FunctionRegistry,
    steps: Optional[List[str]] = None,
    strict: bool = True,
) -> float:
    """
    Evaluate a postfix token sequence with a value stack.

    Numbers are pushed, registered functions replace the top value with their result,
    and operators pop the right operand first, then the left one. A line describing
    each push and application is appended to ``steps`` when given.

    :param List[str] postfix: Tokens in postfix order
    :param FunctionRegistry functions: Functions callable from the expression
    :param Optional[List[str]] steps: Trace receiving one line per operation
    :param bool strict: Reject unknown tokens instead of skipping them

    :return: Computed result as float
    :rtype: float
    :raises MissingFunctionArgumentError: If a function finds an empty stack
    :raises InsufficientOperandsError: If an operator finds fewer than two values
    :raises UnknownTokenError: If strict and a token cannot be interpreted
    :raises FunctionCallError: If a registered function fails
    :raises InvalidExpressionError: If the stack does not end with exactly one value
    """
    trace: List[str] = steps if steps is not None else []
    stack: List[float] = []

    for token in postfix:
        if is_number(token):
            stack.append(float(token))
            trace.append(f"  Push {token} → Stack: {_format_stack(stack)}")
        elif token in functions:
            if not stack:
                raise MissingFunctionArgumentError(f"Missing argument for function: {token}")
            arg: float = stack.pop()
            result: float = call_function(token, functions.get(token), arg)
            stack.append(result)
            trace.append(f"  Apply {token}({arg}) = {result}")
        elif is_operator(token):
            if len(stack) < 2:
                raise InsufficientOperandsError(f"Insufficient operands for: {token}")
            b: float = stack.pop()
            a: float = stack.pop()
            result = apply_operator(token, a, b)
            stack.append(result)
            trace.append(f"  Apply {a} {token} {b} = {result}")
        elif strict:
            raise UnknownTokenError(f"Unknown token: {token}")
        else:
            logger.debug("Skipping unknown token %r", token)

    if len(stack) != 1:
        raise InvalidExpressionError("Invalid expression")

    return stack.pop()
