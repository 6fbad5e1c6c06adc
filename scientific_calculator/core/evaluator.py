"""Evaluate scientific expressions through the full validation/conversion/evaluation pipeline."""
import time
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from scientific_calculator.common.errors import EvaluationError, ExpressionError
from scientific_calculator.common.logger import logger
from scientific_calculator.common.models import EvaluationResult
from scientific_calculator.core.converter import render_postfix, to_postfix
from scientific_calculator.core.functions import FunctionRegistry, UnaryFn
from scientific_calculator.core.postfix import evaluate_postfix
from scientific_calculator.core.tokenizer import tokenize
from scientific_calculator.core.validator import validate


class ExpressionEvaluator(BaseModel):
    """
    Parse and evaluate scientific expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation in double precision

    Algorithm:
        1. Validate the raw string (parentheses, operator placement, empty calls)
        2. Tokenize on operators, parentheses, commas and whitespace
        3. Convert to postfix using Shunting-yard
        4. Evaluate the postfix sequence using a stack

    Each evaluator owns its function registry, so functions registered on one instance
    never leak into another.

    Examples:
        - Infix expression: sqrt(16) + log(100) * 2
        - Postfix: 16 sqrt 100 log 2 * +
        - Value: 8.0
    """

    # Configuration is read-only; the registry itself stays extensible
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    functions: FunctionRegistry = Field(
        default_factory=FunctionRegistry.with_builtins,
        description="Functions callable from expressions",
    )
    strict: bool = Field(default=True, description="Reject unknown identifiers instead of skipping them")

    def register_function(self, name: str, fn: UnaryFn) -> None:
        """
        Make a unary function callable from expressions evaluated by this instance.

        :param str name: Function name, overwriting any existing entry
        :param UnaryFn fn: Callable taking and returning a float

        :return: None
        :raises ValueError: If the name is not a valid identifier or fn is not callable
        """
        self.functions.register(name, fn)
        logger.debug("Registered function %r", name)

    def evaluate(self, expression: str) -> EvaluationResult:
        """
        Evaluate an expression and record every computation step.

        :param str expression: Infix expression, e.g. ``"sin(0) + 2 ^ 3"``

        :return: Value, postfix rendering, step trace and elapsed time
        :rtype: EvaluationResult
        :raises EvaluationError: If any stage rejects the expression; the stage error is the cause
        """
        start: float = time.perf_counter()
        steps: List[str] = []

        try:
            validate(expression)
            steps.append("✓ Expression validated")

            tokens: List[str] = tokenize(expression)
            steps.append(f"✓ Tokenized: [{', '.join(tokens)}]")

            postfix_tokens: List[str] = to_postfix(tokens, self.functions)
            postfix: str = render_postfix(postfix_tokens)
            steps.append(f"✓ Postfix notation: {postfix}")

            value: float = evaluate_postfix(postfix_tokens, self.functions, steps, strict=self.strict)
            steps.append(f"✓ Result: {value}")

        except ExpressionError as exc:
            logger.debug("Evaluation of %r failed: %s", expression, exc)
            raise EvaluationError(f"Evaluation failed: {exc}", exc) from exc

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("Evaluated %r = %s in %d ms", expression, value, elapsed_ms)
        return EvaluationResult(value=value, postfix=postfix, steps=tuple(steps), elapsed_ms=elapsed_ms)


def evaluate(expression: str) -> EvaluationResult:
    """
    Evaluate an expression with the built-in functions only.

    A fresh evaluator is built for every call; use :class:`ExpressionEvaluator` to
    register extra functions.

    :param str expression: Infix expression

    :return: Evaluation result
    :rtype: EvaluationResult
    :raises EvaluationError: If the expression cannot be evaluated
    """
    return ExpressionEvaluator().evaluate(expression)
