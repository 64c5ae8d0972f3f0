"""Built-in functions and constants for the mathpad evaluator.

The tables here are built once at import and never mutated.

Categories:
- Trigonometric: sin, cos, tan, asin, acos, atan
- Hyperbolic: sinh, cosh, tanh
- Exponential: exp, ln, log, log10, sqrt
- Rounding: floor, ceil, round
- Arithmetic: abs, sign

Implementations follow IEEE-754: where the `math` module would raise
ValueError or OverflowError they return nan or an infinity instead, and the
evaluator's finiteness check rejects the result.
"""

import math
from types import MappingProxyType
from typing import Mapping

from mathpad.evaluator.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
)


# -----------------------------------------------------------------------------
# Trigonometric
# -----------------------------------------------------------------------------


def _sin(x: float) -> float:
    return math.sin(x) if math.isfinite(x) else math.nan


def _cos(x: float) -> float:
    return math.cos(x) if math.isfinite(x) else math.nan


def _tan(x: float) -> float:
    return math.tan(x) if math.isfinite(x) else math.nan


def _asin(x: float) -> float:
    return math.asin(x) if -1.0 <= x <= 1.0 else math.nan


def _acos(x: float) -> float:
    return math.acos(x) if -1.0 <= x <= 1.0 else math.nan


# -----------------------------------------------------------------------------
# Hyperbolic
# -----------------------------------------------------------------------------


def _sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def _cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


# -----------------------------------------------------------------------------
# Exponential and logarithmic
# -----------------------------------------------------------------------------


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _sqrt(x: float) -> float:
    # nan fails the comparison and falls through to nan
    return math.sqrt(x) if x >= 0 else math.nan


def _ln(x: float) -> float:
    if x == 0:
        return -math.inf
    if x > 0:
        return math.log(x)
    return math.nan


def _log10(x: float) -> float:
    if x == 0:
        return -math.inf
    if x > 0:
        return math.log10(x)
    return math.nan


# -----------------------------------------------------------------------------
# Rounding and arithmetic
# -----------------------------------------------------------------------------


def _floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def _ceil(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.ceil(x)), x)


def _round(x: float) -> float:
    """Round half toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(x):
        return x
    lower = math.floor(x)
    result = float(lower + 1 if x - lower >= 0.5 else lower)
    return math.copysign(result, x) if result == 0 else result


def _sign(x: float) -> float:
    if math.isnan(x) or x == 0:
        return x
    return math.copysign(1.0, x)


def _fn(
    name: str,
    description: str,
    category: FunctionCategory,
    implementation,
    aliases: tuple[str, ...] = (),
    examples: tuple[str, ...] = (),
) -> FunctionDefinition:
    return FunctionDefinition(
        name=name,
        description=description,
        category=category,
        implementation=implementation,
        aliases=aliases,
        examples=examples,
    )


BUILTIN_FUNCTIONS: tuple[FunctionDefinition, ...] = (
    _fn("sin", "Sine of an angle in radians", FunctionCategory.TRIGONOMETRIC, _sin,
        aliases=("sine",), examples=("sin(pi/2)", "sine(0)")),
    _fn("cos", "Cosine of an angle in radians", FunctionCategory.TRIGONOMETRIC, _cos,
        aliases=("cosine",), examples=("cos(0)",)),
    _fn("tan", "Tangent of an angle in radians", FunctionCategory.TRIGONOMETRIC, _tan,
        aliases=("tangent",), examples=("tan(pi/4)",)),
    _fn("asin", "Inverse sine, in radians", FunctionCategory.TRIGONOMETRIC, _asin,
        aliases=("arcsin",), examples=("asin(1)",)),
    _fn("acos", "Inverse cosine, in radians", FunctionCategory.TRIGONOMETRIC, _acos,
        aliases=("arccos",), examples=("acos(0)",)),
    _fn("atan", "Inverse tangent, in radians", FunctionCategory.TRIGONOMETRIC, math.atan,
        aliases=("arctan", "arctangent"), examples=("atan(1)",)),
    _fn("sinh", "Hyperbolic sine", FunctionCategory.HYPERBOLIC, _sinh,
        examples=("sinh(1)",)),
    _fn("cosh", "Hyperbolic cosine", FunctionCategory.HYPERBOLIC, _cosh,
        examples=("cosh(0)",)),
    _fn("tanh", "Hyperbolic tangent", FunctionCategory.HYPERBOLIC, math.tanh,
        examples=("tanh(1)",)),
    _fn("sqrt", "Square root", FunctionCategory.EXPONENTIAL, _sqrt,
        aliases=("sqr", "squareroot"), examples=("sqrt(16)",)),
    _fn("abs", "Absolute value", FunctionCategory.ARITHMETIC, math.fabs,
        examples=("abs(-3)",)),
    _fn("ln", "Natural logarithm", FunctionCategory.EXPONENTIAL, _ln,
        examples=("ln(e)",)),
    _fn("log", "Natural logarithm", FunctionCategory.EXPONENTIAL, _ln,
        aliases=("logarithm",), examples=("log(e^2)",)),
    _fn("log10", "Base-10 logarithm", FunctionCategory.EXPONENTIAL, _log10,
        examples=("log10(1000)",)),
    _fn("exp", "e raised to the given power", FunctionCategory.EXPONENTIAL, _exp,
        examples=("exp(1)",)),
    _fn("floor", "Largest integer not greater than the value", FunctionCategory.ROUNDING,
        _floor, examples=("floor(2.7)",)),
    _fn("ceil", "Smallest integer not less than the value", FunctionCategory.ROUNDING,
        _ceil, examples=("ceil(2.1)",)),
    _fn("round", "Nearest integer, halves rounded up", FunctionCategory.ROUNDING, _round,
        examples=("round(2.5)",)),
    _fn("sign", "Sign of the value: -1, 0 or 1", FunctionCategory.ARITHMETIC, _sign,
        examples=("sign(-4)",)),
)

FUNCTIONS = FunctionRegistry(BUILTIN_FUNCTIONS)

# Exact-case keys are checked before lowercase ones, so "π" and "pi" both hit.
CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "π": math.pi,
    "tau": math.tau,
    "τ": math.tau,
    "e": math.e,
})


def lookup_constant(identifier: str) -> float | None:
    """Return a constant's value by exact then lowercase name, or None."""
    if identifier in CONSTANTS:
        return CONSTANTS[identifier]
    return CONSTANTS.get(identifier.lower())
