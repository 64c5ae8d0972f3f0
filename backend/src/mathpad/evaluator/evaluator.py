"""Postfix evaluator and public entry point for mathpad expressions.

Walks the postfix token list with an operand stack and produces an
EvaluationResult. All arithmetic follows IEEE-754: division by zero and
overflow yield infinities or nan, which the final finiteness check turns
into a failure.
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Callable, Union

from mathpad.evaluator.builtins import FUNCTIONS
from mathpad.evaluator.lexer import (
    ExpressionError,
    FunctionToken,
    NumberToken,
    Operator,
    OperatorToken,
    Token,
    tokenize,
)
from mathpad.evaluator.parser import to_postfix

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Results
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Success:
    """A successful evaluation.

    Attributes:
        value: The raw result at full precision
        display_value: The result rounded for display
    """

    value: float
    display_value: str

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "value": self.value, "displayValue": self.display_value}


@dataclass(frozen=True)
class Failure:
    """A failed evaluation with a human-readable error message."""

    error: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


EvaluationResult = Union[Success, Failure]


class EvaluationError(ExpressionError):
    """Error while executing postfix tokens."""
    pass


# -----------------------------------------------------------------------------
# Operators
# -----------------------------------------------------------------------------


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def _power(base: float, exponent: float) -> float:
    if exponent == 0:
        return 1.0
    if math.isnan(exponent) or (abs(base) == 1 and math.isinf(exponent)):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # 0 raised to a negative power
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        # Negative base with a non-integer exponent
        return math.nan


BINARY_OPERATORS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda left, right: left + right,
    Operator.SUBTRACT: lambda left, right: left - right,
    Operator.MULTIPLY: lambda left, right: left * right,
    Operator.DIVIDE: _divide,
    Operator.POWER: _power,
}


# -----------------------------------------------------------------------------
# Display formatting
# -----------------------------------------------------------------------------


NOISE_THRESHOLD = 1e-10
DISPLAY_DECIMALS = 10

_DISPLAY_QUANTUM = Decimal(10) ** -DISPLAY_DECIMALS
# Wide enough for 21 integer digits plus the decimals
_DISPLAY_CONTEXT = Context(prec=40)


def number_to_string(value: float) -> str:
    """Render a float with shortest round-trip digits.

    Plain decimal notation is used for scientific exponents from -6
    through 20; anything else is written as e.g. "1e+21" or "1.5e-7".
    """
    if math.isnan(value):
        return "NaN"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + number_to_string(-value)
    if math.isinf(value):
        return "Infinity"

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    # value == 0.DIGITS * 10**point
    point = len(digits) + exponent
    text = "".join(str(d) for d in digits).rstrip("0")
    size = len(text)

    if size <= point <= 21:
        return text + "0" * (point - size)
    if 0 < point <= 21:
        return f"{text[:point]}.{text[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * -point + text

    scientific = point - 1
    exponent_text = f"e{'+' if scientific >= 0 else '-'}{abs(scientific)}"
    if size == 1:
        return text + exponent_text
    return f"{text[0]}.{text[1:]}{exponent_text}"


def format_display_value(value: float) -> str:
    """Format a finite result for display.

    Magnitudes below 1e-10 become "0"; everything else is rounded to ten
    decimal places with trailing zeros dropped.
    """
    if abs(value) < NOISE_THRESHOLD:
        value = 0.0

    if abs(value) < 1e21:
        rounded = Decimal(value).quantize(
            _DISPLAY_QUANTUM, rounding=ROUND_HALF_UP, context=_DISPLAY_CONTEXT
        )
        value = float(rounded)

    return number_to_string(value)


# -----------------------------------------------------------------------------
# Evaluation
# -----------------------------------------------------------------------------


def _execute(tokens: list[Token]) -> float:
    stack: list[float] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            stack.append(token.value)

        elif isinstance(token, OperatorToken):
            if token.operator is Operator.NEGATE:
                if not stack:
                    raise EvaluationError("Invalid unary operation")
                stack.append(-stack.pop())
                continue

            if len(stack) < 2:
                raise EvaluationError("Invalid binary operation")
            right = stack.pop()
            left = stack.pop()
            stack.append(BINARY_OPERATORS[token.operator](left, right))

        elif isinstance(token, FunctionToken):
            if not stack:
                raise EvaluationError(f"Missing value for {token.name}")
            if not FUNCTIONS.is_registered(token.name):
                raise EvaluationError(f'Unsupported function "{token.name}"')
            operand = stack.pop()
            stack.append(FUNCTIONS.get(token.name).implementation(operand))

    if len(stack) != 1:
        raise EvaluationError("Unable to resolve expression")

    value = stack[0]
    if not math.isfinite(value):
        raise EvaluationError("Expression evaluates to an infinite result")
    return value


def evaluate_postfix(tokens: list[Token]) -> EvaluationResult:
    """Evaluate postfix tokens.

    Returns:
        Success with the raw and display values, or Failure with the
        first error encountered
    """
    try:
        value = _execute(tokens)
    except EvaluationError as e:
        return Failure(e.message)
    return Success(value=value, display_value=format_display_value(value))


def evaluate_math_expression(raw_expression: str) -> EvaluationResult:
    """Evaluate an arithmetic expression string.

    This is the main entry point. It never raises for any string input;
    every problem is reported as a Failure.

    Args:
        raw_expression: Expression text; surrounding whitespace is ignored

    Returns:
        Success or Failure

    Example:
        evaluate_math_expression("2+3*4")
        # Success(value=14.0, display_value="14")
    """
    expression = raw_expression.strip()
    if not expression:
        return Failure("No expression to evaluate.")

    try:
        postfix = to_postfix(tokenize(expression))
    except ExpressionError as e:
        logger.debug("Expression %r failed: %s", expression, e.message)
        return Failure(e.message)

    result = evaluate_postfix(postfix)
    if isinstance(result, Failure):
        logger.debug("Expression %r failed: %s", expression, result.error)
    return result
