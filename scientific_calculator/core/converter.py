"""Infix to postfix conversion (Shunting-yard)."""
from typing import Collection, List

from scientific_calculator.core.operators import OPERATORS, is_number, is_operator, precedence

# A function waiting on the stack outranks every operator
_FUNCTION_PRECEDENCE = max(prec for prec, _ in OPERATORS.values()) + 1


def to_postfix(tokens: List[str], functions: Collection[str] = ()) -> List[str]:
    """
    Convert a list of tokens into postfix (Reverse Polish Notation) using the Shunting-yard algorithm.

    An operator pops every stacked operator of higher OR EQUAL precedence before being
    pushed, so chains of equal precedence evaluate left to right. This holds for ``^``
    too: ``2 ^ 3 ^ 2`` becomes ``2 3 ^ 2 ^``.

    Function names are held on the stack and emitted once their argument is closed:
    ``sin ( 0 )`` becomes ``0 sin``. Other identifiers pass through to the output.

    Parentheses are assumed balanced (see :func:`validate`).

    :param List[str] tokens: List of infix tokens
    :param Collection[str] functions: Names of the registered functions

    :return: List of tokens in postfix order
    :rtype: List[str]
    """
    output: List[str] = []
    stack: List[str] = []

    def stacked_precedence(token: str) -> int:
        if is_operator(token):
            return precedence(token)
        return _FUNCTION_PRECEDENCE

    for token in tokens:
        if is_number(token):
            output.append(token)
        elif is_operator(token):
            prec = precedence(token)
            while stack and stack[-1] != "(" and stacked_precedence(stack[-1]) >= prec:
                output.append(stack.pop())
            stack.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            if stack and stack[-1] in functions:
                output.append(stack.pop())
        elif token == ",":
            # Argument separator: flush the current argument, keep the "("
            while stack and stack[-1] != "(":
                output.append(stack.pop())
        elif token in functions:
            stack.append(token)
        else:
            output.append(token)

    # Append remaining operators in pop order (stack top first)
    output.extend(reversed(stack))
    return output


def render_postfix(postfix: List[str]) -> str:
    """Join postfix tokens with single spaces for display."""
    return " ".join(postfix)
