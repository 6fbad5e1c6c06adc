"""Pydantic models for evaluation results."""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EvaluationResult(BaseModel):
    """Outcome of one successful evaluation. Never mutated after construction."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Numeric value of the expression")
    postfix: str = Field(..., description="Postfix tokens joined by single spaces")
    steps: Tuple[str, ...] = Field(..., description="Human-readable computation trace")
    elapsed_ms: int = Field(..., ge=0, description="Wall-clock duration of the call in milliseconds")


class OperationResult(BaseModel):
    """Represents the outcome of one expression evaluated in batch mode."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated value when successful")
    error: Optional[str] = Field(default=None, description="Failure message when evaluation failed")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure that a result and an error are mutually exclusive."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set")
        return self

    def to_line(self) -> str:
        """
        Render the outcome the way it is written to a results file.

        :return: ``expr = value`` or ``expr -> ERROR: message``
        :rtype: str
        """
        if self.error is None:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
