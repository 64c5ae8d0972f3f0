"""Arithmetic expression evaluator for mathpad equation blocks.

This module provides:
- tokenize: Converts expression strings into tokens
- to_postfix: Shunting-yard reordering into postfix order
- evaluate_postfix: Stack evaluation of postfix tokens
- evaluate_math_expression: The public entry point (string in, result out)
- FunctionRegistry: Read-only table of built-in functions and aliases
"""

from mathpad.evaluator.builtins import CONSTANTS, FUNCTIONS, lookup_constant
from mathpad.evaluator.evaluator import (
    EvaluationError,
    EvaluationResult,
    Failure,
    Success,
    evaluate_math_expression,
    evaluate_postfix,
    format_display_value,
    number_to_string,
)
from mathpad.evaluator.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
)
from mathpad.evaluator.lexer import (
    ExpressionError,
    FunctionToken,
    LeftParen,
    LexerError,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    Token,
    is_unary_position,
    tokenize,
)
from mathpad.evaluator.parser import (
    PRECEDENCE,
    RIGHT_ASSOCIATIVE,
    ParseError,
    to_postfix,
)

__all__ = [
    # Entry point
    "evaluate_math_expression",
    # Evaluator
    "EvaluationError",
    "EvaluationResult",
    "Failure",
    "Success",
    "evaluate_postfix",
    "format_display_value",
    "number_to_string",
    # Functions and constants
    "CONSTANTS",
    "FUNCTIONS",
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionRegistry",
    "lookup_constant",
    # Lexer
    "ExpressionError",
    "FunctionToken",
    "LeftParen",
    "LexerError",
    "NumberToken",
    "Operator",
    "OperatorToken",
    "RightParen",
    "Token",
    "is_unary_position",
    "tokenize",
    # Parser
    "PRECEDENCE",
    "RIGHT_ASSOCIATIVE",
    "ParseError",
    "to_postfix",
]
