"""Split an expression into tokens."""
from typing import List

from scientific_calculator.core.operators import DELIMITERS


def tokenize(expression: str) -> List[str]:
    """
    Split an arithmetic expression into tokens.

    Operators, parentheses and commas are always tokens of their own; any other run of
    non-whitespace characters (numbers, function names) is captured verbatim.

    Example: ``"sin(45) + 2^3"`` gives ``["sin", "(", "45", ")", "+", "2", "^", "3"]``.

    :param str expression: Validated expression string

    :return: List of tokens
    :rtype: List[str]
    """
    tokens: List[str] = []
    buffer: List[str] = []

    for char in expression:
        if char.isspace():
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
        elif char in DELIMITERS:
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            tokens.append(char)
        else:
            buffer.append(char)

    if buffer:
        tokens.append("".join(buffer))

    return tokens
