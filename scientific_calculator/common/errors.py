"""Error taxonomy of the evaluation pipeline."""
from typing import Optional


class ExpressionError(ValueError):
    """Base class for every failure raised by a pipeline stage."""


class EmptyExpressionError(ExpressionError):
    """The expression is empty or whitespace-only."""


class MismatchedParenthesesError(ExpressionError):
    """A closing parenthesis has no opener, or an opener is never closed."""


class ConsecutiveOperatorsError(ExpressionError):
    """Two operator symbols follow each other in a disallowed combination."""


class EmptyFunctionCallError(ExpressionError):
    """The expression contains an empty call such as ``sin()``."""


class InsufficientOperandsError(ExpressionError):
    """A binary operator found fewer than two values on the stack."""


class MissingFunctionArgumentError(ExpressionError):
    """A function found no value on the stack."""


class DivisionByZeroError(ExpressionError):
    """The right operand of ``/`` is zero."""


class InvalidExpressionError(ExpressionError):
    """The stack does not hold exactly one value once evaluation ends."""


class UnknownTokenError(ExpressionError):
    """A token is neither a number, an operator, nor a registered function."""


class FunctionCallError(ExpressionError):
    """A registered function raised, or returned something that is not a real number."""


class EvaluationError(ValueError):
    """
    Single outward-facing failure of an evaluation.

    Wraps the stage error that stopped the pipeline; the original exception is kept
    as ``__cause__`` and exposed through :attr:`cause`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        """Stage error that triggered this failure."""
        return self.__cause__
