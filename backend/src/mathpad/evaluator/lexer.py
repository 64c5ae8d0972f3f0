"""Lexer/tokenizer for mathpad expressions.

Converts an expression string into a flat list of tokens for the
shunting-yard converter.

Token kinds:
- NumberToken: numeric literals and resolved constants (pi, tau, e)
- OperatorToken: + - * / ^ and unary minus
- FunctionToken: canonical function names (aliases already resolved)
- LeftParen, RightParen

Scanning is a single left-to-right pass. Whether a "-" is unary depends
only on the previous token, which is carried through the loop explicitly.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from mathpad.evaluator.builtins import FUNCTIONS, lookup_constant


class Operator(Enum):
    """Arithmetic operators, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    NEGATE = "u-"


@dataclass(frozen=True)
class NumberToken:
    value: float


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator


@dataclass(frozen=True)
class FunctionToken:
    name: str


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


Token = Union[NumberToken, OperatorToken, FunctionToken, LeftParen, RightParen]


class ExpressionError(Exception):
    """Base class for all evaluation pipeline errors.

    The message is the user-facing error text, without position suffixes.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LexerError(ExpressionError):
    """Error during lexical analysis."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(message)


WHITESPACE = frozenset(" \t\n")
OPERATOR_CHARS = frozenset("+-*/^")

_DIGIT = re.compile(r"[0-9]")
_IDENTIFIER_START = re.compile(r"[a-zA-Zα-ωΑ-Ω]")
_IDENTIFIER_PART = re.compile(r"[a-zA-Z0-9_πτ]")


def _is_digit(char: str) -> bool:
    return _DIGIT.fullmatch(char) is not None


def _starts_identifier(char: str) -> bool:
    return _IDENTIFIER_START.fullmatch(char) is not None or lookup_constant(char) is not None


def is_unary_position(previous: Token | None) -> bool:
    """Return True if a "-" following `previous` is a negation.

    A minus is unary at the start of input, after another operator,
    after "(" and directly after a function name.
    """
    return previous is None or isinstance(previous, (OperatorToken, LeftParen, FunctionToken))


def scan_number(source: str, start: int) -> tuple[NumberToken, int]:
    """Scan a numeric literal starting at `start`.

    Digits and dots are consumed greedily; the literal is only validated
    when converted.

    Returns:
        The token and the position just past the literal
    """
    end = start
    while end < len(source) and (_is_digit(source[end]) or source[end] == "."):
        end += 1

    text = source[start:end]
    try:
        value = float(text)
    except ValueError:
        raise LexerError(f'Invalid number "{text}"', start)
    return NumberToken(value), end


def scan_identifier(source: str, start: int) -> tuple[Token, int]:
    """Scan an identifier and resolve it to a constant or function.

    Resolution order: exact constant name, lowercase constant name,
    lowercase alias or function name.

    Returns:
        The token and the position just past the identifier
    """
    end = start + 1
    while end < len(source) and _IDENTIFIER_PART.fullmatch(source[end]):
        end += 1

    identifier = source[start:end]

    constant = lookup_constant(identifier)
    if constant is not None:
        return NumberToken(constant), end

    canonical = FUNCTIONS.resolve(identifier)
    if canonical is not None:
        return FunctionToken(canonical), end

    raise LexerError(f'Unknown identifier "{identifier}"', start)


def tokenize(expression: str) -> list[Token]:
    """Tokenize an expression string.

    Args:
        expression: Expression text, already trimmed by the caller

    Returns:
        Tokens in source order

    Raises:
        LexerError: On malformed numbers, unknown identifiers or
            unsupported characters
    """
    tokens: list[Token] = []
    position = 0
    previous: Token | None = None

    while position < len(expression):
        char = expression[position]

        if char in WHITESPACE:
            position += 1
            continue

        token: Token
        if _is_digit(char) or char == ".":
            token, position = scan_number(expression, position)
        elif _starts_identifier(char):
            token, position = scan_identifier(expression, position)
        elif char == "(":
            token, position = LeftParen(), position + 1
        elif char == ")":
            token, position = RightParen(), position + 1
        elif char in OPERATOR_CHARS:
            if char == "-" and is_unary_position(previous):
                token = OperatorToken(Operator.NEGATE)
            else:
                token = OperatorToken(Operator(char))
            position += 1
        else:
            raise LexerError(f'Unsupported character "{char}"', position)

        tokens.append(token)
        previous = token

    return tokens
