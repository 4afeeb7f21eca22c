"""Varpp preprocessor library.

Line-oriented text preprocessor that produces build variants from single source
with `#if` / `#elif` / `#else` / `#endif` conditionals, integer expressions and macro substitution.
"""

from .exceptions import VarppError
from .expression import EvaluationResult, evaluate_expression, try_evaluate_expression
from .location import SourceLocation
from .preprocessor import (
    Preprocessor,
    PreprocessorConfig,
    PreprocessResult,
    preprocess_text,
)

__all__ = [
    "EvaluationResult",
    "PreprocessResult",
    "Preprocessor",
    "PreprocessorConfig",
    "SourceLocation",
    "VarppError",
    "evaluate_expression",
    "preprocess_text",
    "try_evaluate_expression",
]
