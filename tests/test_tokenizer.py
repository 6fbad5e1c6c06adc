"""Test function tokenize."""
import pytest

from scientific_calculator.core.tokenizer import tokenize


def test_tokenize_basic():
    """Tokenize splits a simple expression into correct tokens."""
    assert tokenize("3 + 4 * 2") == ["3", "+", "4", "*", "2"]


@pytest.mark.parametrize("expr,expected", [
    ("3+4*2", ["3", "+", "4", "*", "2"]),
    ("sin(45) + 2^3", ["sin", "(", "45", ")", "+", "2", "^", "3"]),
    ("  12.5   *  x ", ["12.5", "*", "x"]),
    ("max(1,2)", ["max", "(", "1", ",", "2", ")"]),
    ("10 % 3", ["10", "%", "3"]),
    ("2 * -3", ["2", "*", "-", "3"]),
    ("3.14abc", ["3.14abc"]),
    ("", []),
])
def test_tokenize_various(expr, expected):
    """Operators, parentheses and commas are split; other runs are kept verbatim."""
    assert tokenize(expr) == expected
