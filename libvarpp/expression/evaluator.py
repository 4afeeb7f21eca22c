"""Stack machine that evaluates reverse polish notation (RPN) tokens into an integer."""

from __future__ import annotations

import operator as op
from typing import TYPE_CHECKING

from libvarpp.expression.errors import (
    DivisionByZeroError,
    ExpressionEvaluationFailureError,
)
from libvarpp.expression.integers import (
    SHIFT_COUNT_MASK,
    truncating_divide,
    truncating_remainder,
    wrap_integer,
)
from libvarpp.expression.tokens import Operand, Operator, OperatorCode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from libvarpp.expression.tokens import ExpressionToken


def _shift_left(left: int, right: int) -> int:
    return left << (right & SHIFT_COUNT_MASK)


def _shift_right(left: int, right: int) -> int:
    return left >> (right & SHIFT_COUNT_MASK)


def _as_flag(predicate: Callable[[int, int], bool]) -> Callable[[int, int], int]:
    return lambda left, right: int(predicate(left, right))


BINARY_OPERATIONS: dict[OperatorCode, Callable[[int, int], int]] = {
    OperatorCode.MULTIPLY: op.mul,
    OperatorCode.DIVIDE: truncating_divide,
    OperatorCode.REMAINDER: truncating_remainder,
    OperatorCode.ADD: op.add,
    OperatorCode.SUBTRACT: op.sub,
    OperatorCode.SHIFT_LEFT: _shift_left,
    OperatorCode.SHIFT_RIGHT: _shift_right,
    OperatorCode.LESSER: _as_flag(op.lt),
    OperatorCode.LESSER_EQUAL: _as_flag(op.le),
    OperatorCode.GREATER: _as_flag(op.gt),
    OperatorCode.GREATER_EQUAL: _as_flag(op.ge),
    OperatorCode.EQUAL: _as_flag(op.eq),
    OperatorCode.NOT_EQUAL: _as_flag(op.ne),
    OperatorCode.BIT_AND: op.and_,
    OperatorCode.BIT_XOR: op.xor,
    OperatorCode.BIT_OR: op.or_,
    OperatorCode.LOGICAL_AND: _as_flag(lambda left, right: bool(left) and bool(right)),
    OperatorCode.LOGICAL_OR: _as_flag(lambda left, right: bool(left) or bool(right)),
}

DIVISION_OPERATORS = frozenset({OperatorCode.DIVIDE, OperatorCode.REMAINDER})


def evaluate_rpn(
    queue: Iterable[ExpressionToken],
    *,
    expression: str = "",
) -> int:
    """Evaluate RPN tokens with an operand stack.

    :raises DivisionByZeroError: when divisor of `/` or `%` is zero.
    :raises ExpressionEvaluationFailureError: when operator lacks operands or not exactly one result left.
    """
    operands: list[int] = []

    for token in queue:
        match token:
            case Operand(value=value):
                operands.append(value)
            case Operator(code=code):
                operands.append(_apply_operator(code, operands, expression))

    if len(operands) != 1:
        raise ExpressionEvaluationFailureError(
            expression=expression,
            details=f"expected single result but {len(operands)} operands left",
        )
    return operands[0]


def _apply_operator(code: OperatorCode, operands: list[int], expression: str) -> int:
    if len(operands) < 2:
        raise ExpressionEvaluationFailureError(
            expression=expression,
            details=f"operator `{code.value}` requires two operands",
        )

    # Top of the stack is an right-hand side operand
    right = operands.pop()
    left = operands.pop()

    if code in DIVISION_OPERATORS and right == 0:
        raise DivisionByZeroError(expression=expression, dividend=left, operator=code.value)

    if not (operation := BINARY_OPERATIONS.get(code)):
        # Only halves of two-character operators (`=`, `!`) may get there
        raise ExpressionEvaluationFailureError(
            expression=expression,
            details=f"`{code.value}` is not an binary operator",
        )
    return wrap_integer(operation(left, right))
