"""Operator-precedence resolver converting infix tokens into reverse polish notation (RPN).

https://en.wikipedia.org/wiki/Shunting_yard_algorithm
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from libvarpp.expression.errors import MismatchedParenthesisError
from libvarpp.expression.tokens import ExpressionToken, Operand, Operator

if TYPE_CHECKING:
    from collections.abc import Iterable


def resolve_operator_precedence(
    tokens: Iterable[ExpressionToken],
    *,
    expression: str = "",
) -> deque[ExpressionToken]:
    """Reorder infix tokens into RPN queue respecting precedence and parentheses.

    Unmatched open parenthesis left at the end of an expression is silently dropped,
    only unmatched closing one is treated as an error.
    :raises MismatchedParenthesisError: if closing parenthesis has no open one.
    """
    queue: deque[ExpressionToken] = deque()
    stack: list[Operator] = []

    for token in tokens:
        match token:
            case Operand():
                queue.append(token)
            case Operator() if token.is_paren_left:
                stack.append(token)
            case Operator() if token.is_paren_right:
                _pop_until_paren_left(stack, queue, expression)
            case Operator():
                _push_binary_operator(token.with_precedence(), stack, queue)

    while stack and not stack[-1].is_paren_left:
        queue.append(stack.pop())

    return queue


def _pop_until_paren_left(
    stack: list[Operator],
    queue: deque[ExpressionToken],
    expression: str,
) -> None:
    while stack and not stack[-1].is_paren_left:
        queue.append(stack.pop())

    if not stack:
        raise MismatchedParenthesisError(expression=expression)

    # Matching `(` is discarded
    stack.pop()


def _push_binary_operator(
    operator: Operator,
    stack: list[Operator],
    queue: deque[ExpressionToken],
) -> None:
    assert operator.precedence is not None

    # Left-associative: operators of same tier that came earlier are resolved first
    while stack and not stack[-1].is_paren_left:
        top = stack[-1]
        assert top.precedence is not None
        if top.precedence > operator.precedence:
            break
        queue.append(stack.pop())

    stack.append(operator)
