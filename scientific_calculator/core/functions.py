"""Registry of named unary functions available to expressions."""
import functools
import math
from typing import Callable, Dict, Iterator, List, Optional

from scientific_calculator.core.operators import DELIMITERS, is_number

# Type alias for unary functions (taking a float, returning a float)
UnaryFn = Callable[[float], float]


def _ieee(fn: UnaryFn) -> UnaryFn:
    """
    Wrap a ``math`` function so that it answers like an IEEE 754 double instead of raising.

    Domain errors (``sqrt(-1)``, ``sin(inf)``) give NaN and overflow (``exp(1000)``)
    gives infinity.

    :param UnaryFn fn: Function from the math module

    :return: Function that never raises for a float argument
    :rtype: UnaryFn
    """
    @functools.wraps(fn)
    def wrapper(value: float) -> float:
        try:
            return fn(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapper


def _logarithm(fn: UnaryFn) -> UnaryFn:
    @functools.wraps(fn)
    def wrapper(value: float) -> float:
        if value == 0:
            return -math.inf
        # NaN and negative arguments
        if not value > 0:
            return math.nan
        return fn(value)
    return wrapper


def _rounding(fn: Callable[[float], int]) -> UnaryFn:
    # math.ceil and math.floor return int and raise on NaN and infinity
    @functools.wraps(fn)
    def wrapper(value: float) -> float:
        return float(fn(value)) if math.isfinite(value) else value
    return wrapper


BUILTIN_FUNCTIONS: Dict[str, UnaryFn] = {
    "sin": _ieee(math.sin),
    "cos": _ieee(math.cos),
    "tan": _ieee(math.tan),
    "log": _logarithm(math.log10),
    "ln": _logarithm(math.log),
    "sqrt": _ieee(math.sqrt),
    "abs": abs,
    "exp": _ieee(math.exp),
    "ceil": _rounding(math.ceil),
    "floor": _rounding(math.floor),
    "rad": math.radians,
    "deg": math.degrees,
}


class FunctionRegistry:
    """
    Mapping of function names to unary real-valued functions.

    Names are unique: registering an existing name replaces the previous entry.
    Lookups never raise; the postfix evaluator decides what to do with a name that
    is not registered.

    Instances are plain mutable state without locking. Register functions before
    sharing a registry between threads.
    """

    def __init__(self, functions: Optional[Dict[str, UnaryFn]] = None):
        self._functions: Dict[str, UnaryFn] = {}
        for name, fn in (functions or {}).items():
            self.register(name, fn)

    @classmethod
    def with_builtins(cls) -> "FunctionRegistry":
        """
        Build a registry holding the built-in scientific functions.

        :return: New registry with sin, cos, tan, log, ln, sqrt, abs, exp, ceil, floor, rad and deg
        :rtype: FunctionRegistry
        """
        return cls(BUILTIN_FUNCTIONS)

    @staticmethod
    def _check_name(name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Function name must be a non-empty string")
        # The tokenizer splits on these, so such a name never reaches the evaluator
        if any(char.isspace() or char in DELIMITERS for char in name):
            raise ValueError(f"Function name cannot contain whitespace or operators: {name!r}")
        if is_number(name):
            raise ValueError(f"Function name cannot be a number: {name!r}")

    def register(self, name: str, fn: UnaryFn) -> None:
        """
        Register a unary function under the given name, overwriting any previous entry.

        :param str name: Identifier used in expressions (e.g. ``"cbrt"``)
        :param UnaryFn fn: Callable taking and returning a float

        :return: None
        :raises ValueError: If the name cannot be written in an expression or fn is not callable
        """
        self._check_name(name)
        if not callable(fn):
            raise ValueError(f"Function {name!r} must be callable")
        self._functions[name] = fn

    def get(self, name: str) -> Optional[UnaryFn]:
        return self._functions.get(name)

    def names(self) -> List[str]:
        return sorted(self._functions)

    def copy(self) -> "FunctionRegistry":
        """Return an independent registry with the same entries."""
        return FunctionRegistry(dict(self._functions))

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)
