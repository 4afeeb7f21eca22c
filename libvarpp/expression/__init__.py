"""Integer expression engine (tokenizer, shunting-yard resolver and RPN evaluator)."""

from .expression import EvaluationResult, evaluate_expression, try_evaluate_expression
from .tokenizer import tokenize_expression

__all__ = [
    "EvaluationResult",
    "evaluate_expression",
    "tokenize_expression",
    "try_evaluate_expression",
]
