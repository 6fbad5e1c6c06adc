"""
Command-line entrypoint of the scientific calculator.

Modes:
- Evaluate one expression given as arguments and print value, postfix, time and steps
- Evaluate every line of a text file or archive (``--file``)
- Sample a one-variable expression over a domain (``--plot``)
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, FilePath, ValidationError, model_validator

from scientific_calculator.batch.runner import build_output_path, run_batch
from scientific_calculator.common.logger import logger
from scientific_calculator.common.models import EvaluationResult
from scientific_calculator.core.evaluator import ExpressionEvaluator
from scientific_calculator.plotting.sampler import sample_function


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : Optional[str]
        Expression built by joining the positional arguments.
    file_path : Optional[FilePath]
        Path to a file or archive containing one expression per line.
    """

    model_config = ConfigDict(frozen=True)

    expression: Optional[str] = None
    file_path: Optional[FilePath] = None
    decimals: int = Field(default=6, ge=0, le=17)
    lenient: bool = False
    verbose: bool = False
    plot: bool = False
    variable: str = Field(default="x", min_length=1)
    start: float = -10.0
    stop: float = 10.0
    step: float = Field(default=0.5, gt=0)

    @model_validator(mode="after")
    def check_mode(self) -> "CliArgs":
        """Ensure that exactly one input source is given and that the plot domain is valid."""
        if (self.expression is None) == (self.file_path is None):
            raise ValueError("Provide exactly one of an expression or --file")
        if self.plot and self.expression is None:
            raise ValueError("--plot requires an expression")
        if self.stop < self.start:
            raise ValueError("--stop must not be lower than --start")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, sys.argv[1:] when omitted
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="scientific-calculator",
        description="Evaluate scientific expressions such as 'sin(0) + 2 ^ 3 * sqrt(9)'",
    )

    parser.add_argument("expression", nargs="*", help="Expression to evaluate; arguments are joined with spaces")
    parser.add_argument("--file", dest="file_path", help="Text file or archive with one expression per line")
    parser.add_argument("--decimals", type=int, default=6, help="Decimal places of printed values (default: 6)")
    parser.add_argument("--lenient", action="store_true", help="Skip unknown identifiers instead of failing")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline progress to stderr")
    parser.add_argument("--plot", action="store_true", help="Sample the expression over a domain of --variable")
    parser.add_argument("--variable", default="x", help="Variable substituted when plotting (default: x)")
    parser.add_argument("--start", type=float, default=-10.0, help="First sample (default: -10)")
    parser.add_argument("--stop", type=float, default=10.0, help="Last sample (default: 10)")
    parser.add_argument("--step", type=float, default=0.5, help="Sampling step (default: 0.5)")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            expression=" ".join(args.expression) if args.expression else None,
            file_path=args.file_path,
            decimals=args.decimals,
            lenient=args.lenient,
            verbose=args.verbose,
            plot=args.plot,
            variable=args.variable,
            start=args.start,
            stop=args.stop,
            step=args.step,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def format_result(result: EvaluationResult, decimals: int = 6) -> str:
    """
    Render an evaluation result as printed on the command line.

    :param EvaluationResult result: Successful evaluation
    :param int decimals: Decimal places of the value
    :return: Multi-line report with value, postfix, time and steps
    :rtype: str
    """
    lines = [
        "=== RESULT ===",
        f"Value: {result.value:.{decimals}f}",
        f"Postfix: {result.postfix}",
        f"Time: {result.elapsed_ms} ms",
        "",
        "=== STEPS ===",
        *result.steps,
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``scientific-calculator`` command.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    if cli_args.verbose:
        logger.setLevel(logging.DEBUG)

    evaluator = ExpressionEvaluator(strict=not cli_args.lenient)

    try:
        if cli_args.file_path is not None:
            output_path = build_output_path(cli_args.file_path)
            results = run_batch(cli_args.file_path, output_path, evaluator)
            failed = sum(1 for outcome in results if outcome.error is not None)
            print(f"Evaluated {len(results)} expressions ({failed} failed), results written to {output_path}")

        elif cli_args.plot:
            points = sample_function(
                cli_args.expression,
                variable=cli_args.variable,
                start=cli_args.start,
                stop=cli_args.stop,
                step=cli_args.step,
                evaluator=evaluator,
            )
            print(f"f({cli_args.variable}) = {cli_args.expression}")
            for x, y in points:
                print(f"{x:.{cli_args.decimals}f}\t{y:.{cli_args.decimals}f}")

        else:
            print(f"Evaluating: {cli_args.expression}")
            print()
            print(format_result(evaluator.evaluate(cli_args.expression), cli_args.decimals))

    except ValueError as exc:
        # EvaluationError and input file errors
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
