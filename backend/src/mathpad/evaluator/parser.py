"""Shunting-yard converter for mathpad expressions.

Reorders the infix token list into postfix (Reverse Polish) order.

Operator Precedence (lowest to highest):
1. + -
2. * /
3. ^          (right-associative)
4. - (unary)  (right-associative)

Functions behave as prefix operators bound to the next primary: they are
popped when their parenthesized argument closes, or when any operator
arrives while they sit on top of the stack.
"""

from types import MappingProxyType
from typing import Mapping

from mathpad.evaluator.lexer import (
    ExpressionError,
    FunctionToken,
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    Token,
)


PRECEDENCE: Mapping[Operator, int] = MappingProxyType({
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.POWER: 3,
    Operator.NEGATE: 4,
})

RIGHT_ASSOCIATIVE = frozenset({Operator.POWER, Operator.NEGATE})


class ParseError(ExpressionError):
    """Error while reordering tokens (unbalanced parentheses)."""
    pass


MISMATCHED_PARENTHESES = "Mismatched parentheses"


def _should_pop(top: Operator, incoming: Operator) -> bool:
    """Whether `top` leaves the stack before `incoming` is pushed."""
    top_precedence = PRECEDENCE[top]
    incoming_precedence = PRECEDENCE[incoming]
    if top_precedence > incoming_precedence:
        return True
    return top_precedence == incoming_precedence and incoming not in RIGHT_ASSOCIATIVE


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert infix tokens to postfix order.

    Raises:
        ParseError: If parentheses are unbalanced
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            output.append(token)

        elif isinstance(token, FunctionToken):
            stack.append(token)

        elif isinstance(token, OperatorToken):
            while stack:
                top = stack[-1]
                if isinstance(top, FunctionToken) or (
                    isinstance(top, OperatorToken) and _should_pop(top.operator, token.operator)
                ):
                    output.append(stack.pop())
                    continue
                break
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise ParseError(MISMATCHED_PARENTHESES)
            stack.pop()

            # Apply a function to its parenthesized group
            if stack and isinstance(stack[-1], FunctionToken):
                output.append(stack.pop())

    while stack:
        token = stack.pop()
        if isinstance(token, (LeftParen, RightParen)):
            raise ParseError(MISMATCHED_PARENTHESES)
        output.append(token)

    return output
