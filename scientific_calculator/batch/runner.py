"""Evaluate every expression of a file and write the results next to it."""
from pathlib import Path
from typing import List, Optional

from scientific_calculator.batch.reader import read_expressions
from scientific_calculator.common.errors import EvaluationError
from scientific_calculator.common.logger import logger
from scientific_calculator.common.models import OperationResult
from scientific_calculator.core.evaluator import ExpressionEvaluator


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    # Path.stem only strips the last suffix; strip all of them for .tar.xz
    suffixes = "".join(input_path.suffixes)
    base = input_path.name[: len(input_path.name) - len(suffixes)]
    return input_path.with_name(f"{base}{suffixes.replace('.', '_')}_results.txt")


def run_batch(
    input_file: Path,
    output_file: Optional[Path] = None,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> List[OperationResult]:
    """
    Evaluate each expression of the input file independently.

    A failing line is reported in the results file and does not stop the batch.
    Every result line is flushed as soon as it is computed.

    :param Path input_file: Text file or archive with one expression per line
    :param Optional[Path] output_file: Results file, derived from input_file when omitted
    :param Optional[ExpressionEvaluator] evaluator: Evaluator to use, default built-ins when omitted

    :return: One OperationResult per expression, in input order
    :rtype: List[OperationResult]
    :raises ValueError: If the input archive is unsupported or holds no .txt file
    """
    evaluator = evaluator or ExpressionEvaluator()
    output_file = output_file or build_output_path(input_file)

    expressions: List[str] = read_expressions(input_file)
    logger.info("Evaluating %d expressions from %s", len(expressions), input_file)

    results: List[OperationResult] = []
    with output_file.open("w", encoding="utf-8") as f_out:
        for line_number, expr in enumerate(expressions, start=1):
            try:
                value = evaluator.evaluate(expr).value
                outcome = OperationResult(expression=expr, result=value)
            except EvaluationError as exc:
                logger.error("Line %d failed: %s", line_number, exc)
                outcome = OperationResult(expression=expr, error=str(exc))

            f_out.write(outcome.to_line() + "\n")
            f_out.flush()
            results.append(outcome)

    logger.info("Results written to %s", output_file)
    return results
