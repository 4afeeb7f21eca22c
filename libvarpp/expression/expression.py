from __future__ import annotations

from dataclasses import dataclass

from libvarpp.exceptions import VarppError
from libvarpp.expression.errors import ExpressionEvaluationFailureError
from libvarpp.expression.evaluator import evaluate_rpn
from libvarpp.expression.shunting_yard import resolve_operator_precedence
from libvarpp.expression.tokenizer import tokenize_expression


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of an expression evaluation that does not raise on expected failures."""

    value: int = 0
    error: VarppError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def evaluate_expression(expression: str) -> int:
    """Evaluate integer expression (tokenize, resolve precedence into RPN, compute).

    Expression must be already macro-expanded, unknown identifiers are treated as zero.
    :raises VarppError: one of expression errors if expression cannot be evaluated.
    """
    tokens = tokenize_expression(expression)
    if not tokens:
        raise ExpressionEvaluationFailureError(
            expression=expression,
            details="expression is empty",
        )

    queue = resolve_operator_precedence(tokens, expression=expression)
    return evaluate_rpn(queue, expression=expression)


def try_evaluate_expression(expression: str) -> EvaluationResult:
    """Evaluate expression as `evaluate_expression` but capture failure into result."""
    try:
        return EvaluationResult(value=evaluate_expression(expression))
    except VarppError as e:
        return EvaluationResult(error=e)
