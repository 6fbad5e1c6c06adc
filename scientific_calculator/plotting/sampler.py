"""Sample a one-variable expression over a numeric domain."""
from typing import List, Optional, Tuple

from scientific_calculator.common.logger import logger
from scientific_calculator.core.evaluator import ExpressionEvaluator
from scientific_calculator.core.tokenizer import tokenize


def substitute(expression: str, variable: str, value: float) -> str:
    """
    Replace every token equal to ``variable`` with a numeric literal.

    Only whole tokens are replaced, so ``x`` does not touch ``exp``. The grammar has
    no unary minus, hence negative values are written as ``(0 - v)``. Values are
    rounded to 12 decimal places.

    :param str expression: Expression mentioning the variable
    :param str variable: Variable name
    :param float value: Value to substitute

    :return: Expression with the variable replaced, tokens joined by spaces
    :rtype: str
    """
    # Positional notation: an exponent such as "1e-07" would be split on its "-"
    magnitude = f"{abs(float(value)):.12f}".rstrip("0").rstrip(".") or "0"
    literal = magnitude if value >= 0 else f"( 0 - {magnitude} )"
    return " ".join(literal if token == variable else token for token in tokenize(expression))


def sample_function(
    expression: str,
    variable: str = "x",
    start: float = -10.0,
    stop: float = 10.0,
    step: float = 0.5,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> List[Tuple[float, float]]:
    """
    Evaluate ``f(variable)`` at ``start, start + step, ...`` up to and including ``stop``.

    :param str expression: Expression of one variable, e.g. ``"x ^ 2 - 1"``
    :param str variable: Name of the variable in the expression
    :param float start: First sample
    :param float stop: Last sample (included when reached exactly)
    :param float step: Distance between samples, must be positive
    :param Optional[ExpressionEvaluator] evaluator: Evaluator to use, default built-ins when omitted

    :return: List of (x, y) pairs
    :rtype: List[Tuple[float, float]]
    :raises ValueError: If the variable does not occur in the expression or the domain is empty
    :raises EvaluationError: If any sample fails to evaluate
    """
    if variable not in tokenize(expression):
        raise ValueError(f"To plot, expression must contain '{variable}' variable")
    if step <= 0:
        raise ValueError("Step must be positive")
    if stop < start:
        raise ValueError("Stop must not be lower than start")

    evaluator = evaluator or ExpressionEvaluator()
    # Index-based sampling avoids accumulating rounding error
    count = int(round((stop - start) / step, 9)) + 1
    points: List[Tuple[float, float]] = []
    for i in range(count):
        x = float(start + i * step)
        y = evaluator.evaluate(substitute(expression, variable, x)).value
        points.append((x, y))

    logger.debug("Sampled %r at %d points", expression, len(points))
    return points
