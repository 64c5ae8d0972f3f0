"""Tests for the function registry, built-in functions and constants."""

import math

import pytest

from mathpad.evaluator import (
    CONSTANTS,
    FUNCTIONS,
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
    lookup_constant,
)
from mathpad.evaluator.builtins import (
    _acos,
    _asin,
    _ceil,
    _cosh,
    _exp,
    _floor,
    _ln,
    _log10,
    _round,
    _sign,
    _sin,
    _sinh,
    _sqrt,
)


CANONICAL_NAMES = {
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh",
    "sqrt", "abs", "ln", "log", "log10", "exp",
    "floor", "ceil", "round", "sign",
}


class TestFunctionRegistry:
    """Tests for FunctionRegistry lookups."""

    def test_all_builtins_registered(self):
        assert {f.name for f in FUNCTIONS.list_all()} == CANONICAL_NAMES

    @pytest.mark.parametrize(
        "identifier, canonical",
        [
            ("sin", "sin"),
            ("SIN", "sin"),
            ("sine", "sin"),
            ("Cosine", "cos"),
            ("tangent", "tan"),
            ("arcsin", "asin"),
            ("arccos", "acos"),
            ("arctan", "atan"),
            ("arctangent", "atan"),
            ("logarithm", "log"),
            ("sqr", "sqrt"),
            ("squareroot", "sqrt"),
        ],
    )
    def test_resolve(self, identifier, canonical):
        assert FUNCTIONS.resolve(identifier) == canonical

    def test_resolve_unknown(self):
        assert FUNCTIONS.resolve("foo") is None
        assert FUNCTIONS.resolve("pi") is None

    def test_get(self):
        assert FUNCTIONS.get("sqrt").implementation(16.0) == 4.0

    def test_get_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown function: nope"):
            FUNCTIONS.get("nope")

    def test_is_registered_uses_canonical_names(self):
        assert FUNCTIONS.is_registered("sin")
        assert not FUNCTIONS.is_registered("sine")

    def test_list_by_category(self):
        names = {f.name for f in FUNCTIONS.list_by_category(FunctionCategory.HYPERBOLIC)}
        assert names == {"sinh", "cosh", "tanh"}

    def test_aliases_are_read_only(self):
        with pytest.raises(TypeError):
            FUNCTIONS.aliases["cube"] = "sqrt"

    def test_duplicate_definitions_rejected(self):
        definition = FunctionDefinition(
            name="twice",
            description="Doubles",
            category=FunctionCategory.ARITHMETIC,
            implementation=lambda x: 2 * x,
        )
        with pytest.raises(ValueError, match="Duplicate function"):
            FunctionRegistry([definition, definition])

    def test_export_documentation(self):
        docs = FUNCTIONS.export_documentation()

        assert set(docs["functions"]) == CANONICAL_NAMES
        assert docs["functions"]["sqrt"]["aliases"] == ["sqr", "squareroot"]
        assert docs["functions"]["sqrt"]["category"] == "exponential"
        assert {f["name"] for f in docs["byCategory"]["trigonometric"]} == {
            "sin", "cos", "tan", "asin", "acos", "atan",
        }
        assert docs["aliases"]["sine"] == "sin"


class TestConstants:
    """Tests for the constant table."""

    def test_values(self):
        assert CONSTANTS["pi"] == math.pi
        assert CONSTANTS["π"] == math.pi
        assert CONSTANTS["tau"] == 2 * math.pi
        assert CONSTANTS["τ"] == 2 * math.pi
        assert CONSTANTS["e"] == math.e

    def test_lookup_falls_back_to_lowercase(self):
        assert lookup_constant("PI") == math.pi
        assert lookup_constant("Π") == math.pi
        assert lookup_constant("phi") is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CONSTANTS["pi"] = 3.0


class TestBuiltinImplementations:
    """Built-ins return IEEE-754 values instead of raising."""

    def test_domain_errors_return_nan(self):
        assert math.isnan(_sqrt(-1.0))
        assert math.isnan(_asin(2.0))
        assert math.isnan(_acos(-1.5))
        assert math.isnan(_ln(-1.0))
        assert math.isnan(_log10(-1.0))
        assert math.isnan(_sin(math.inf))

    def test_logarithm_of_zero(self):
        assert _ln(0.0) == -math.inf
        assert _log10(0.0) == -math.inf

    def test_overflow_returns_infinity(self):
        assert _exp(1000.0) == math.inf
        assert _cosh(1000.0) == math.inf
        assert _sinh(-1000.0) == -math.inf

    def test_rounding_passes_non_finite_through(self):
        assert _floor(math.inf) == math.inf
        assert _ceil(-math.inf) == -math.inf
        assert math.isnan(_round(math.nan))

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3.0), (-2.5, -2.0), (2.4, 2.0), (-2.6, -3.0), (0.49999999999999994, 0.0)],
    )
    def test_round_half_up(self, value, expected):
        assert _round(value) == expected

    def test_sign(self):
        assert _sign(-4.0) == -1.0
        assert _sign(3.5) == 1.0
        assert _sign(0.0) == 0.0
        assert math.isnan(_sign(math.nan))

    def test_floor_and_ceil_return_floats(self):
        assert _floor(2.7) == 2.0
        assert isinstance(_floor(2.7), float)
        assert _ceil(2.1) == 3.0
