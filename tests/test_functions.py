"""Test class FunctionRegistry."""
import math

import pytest

from scientific_calculator.core.functions import FunctionRegistry


def test_builtins():
    """The built-in registry holds the twelve scientific functions."""
    registry = FunctionRegistry.with_builtins()
    assert registry.names() == sorted([
        "sin", "cos", "tan", "log", "ln", "sqrt", "abs", "exp", "ceil", "floor", "rad", "deg",
    ])
    assert len(registry) == 12


@pytest.mark.parametrize("name,arg,expected", [
    ("log", 1000.0, 3.0),
    ("ln", math.e, 1.0),
    ("rad", 180.0, math.pi),
    ("deg", math.pi, 180.0),
    ("abs", -2.5, 2.5),
    ("sqrt", 9.0, 3.0),
    ("ceil", 1.2, 2.0),
    ("floor", 1.8, 1.0),
])
def test_builtin_values(name, arg, expected):
    """Built-in functions compute the expected values."""
    fn = FunctionRegistry.with_builtins().get(name)
    assert fn(arg) == pytest.approx(expected)


def test_register_and_overwrite():
    """Registering an existing name replaces the previous function."""
    registry = FunctionRegistry.with_builtins()
    registry.register("cbrt", lambda v: v ** (1 / 3))
    assert "cbrt" in registry
    registry.register("sin", lambda v: 0.5)
    assert registry.get("sin")(123.0) == 0.5
    assert len(registry) == 13


def test_get_unknown_returns_none():
    """Looking up an unknown name does not raise."""
    assert FunctionRegistry().get("nope") is None
    assert "nope" not in FunctionRegistry()


@pytest.mark.parametrize("name", ["", "two words", "f+g", "f(", "a,b", "12", "1.5"])
def test_register_rejects_invalid_names(name):
    """Names that cannot appear as one token are rejected."""
    with pytest.raises(ValueError):
        FunctionRegistry().register(name, abs)


def test_register_rejects_non_callable():
    """Only callables can be registered."""
    with pytest.raises(ValueError):
        FunctionRegistry().register("pi", 3.14)


def test_copy_is_independent():
    """Changes to a copy do not leak into the original registry."""
    original = FunctionRegistry.with_builtins()
    clone = original.copy()
    clone.register("half", lambda v: v / 2)
    assert "half" in clone
    assert "half" not in original


@pytest.mark.parametrize("name,arg,expected", [
    ("log", 0.0, -math.inf),
    ("ln", 0.0, -math.inf),
    ("exp", 1000.0, math.inf),
    ("ceil", math.inf, math.inf),
    ("floor", -math.inf, -math.inf),
])
def test_builtins_return_infinity(name, arg, expected):
    """Built-ins return infinity where the math module would raise."""
    assert FunctionRegistry.with_builtins().get(name)(arg) == expected


@pytest.mark.parametrize("name,arg", [
    ("sqrt", -1.0),
    ("log", -1.0),
    ("ln", -5.0),
    ("sin", math.inf),
    ("cos", -math.inf),
    ("tan", math.inf),
    ("floor", math.nan),
])
def test_builtins_return_nan(name, arg):
    """Built-ins return NaN outside their domain."""
    assert math.isnan(FunctionRegistry.with_builtins().get(name)(arg))
