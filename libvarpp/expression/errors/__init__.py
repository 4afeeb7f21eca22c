"""Errors collections that expression engine may raise (user-facing ones)."""

from .division_by_zero import DivisionByZeroError
from .expression_evaluation_failure import ExpressionEvaluationFailureError
from .illegal_character import IllegalCharacterError
from .malformed_operator_sequence import MalformedOperatorSequenceError
from .mismatched_parenthesis import MismatchedParenthesisError

__all__ = [
    "DivisionByZeroError",
    "ExpressionEvaluationFailureError",
    "IllegalCharacterError",
    "MalformedOperatorSequenceError",
    "MismatchedParenthesisError",
]
