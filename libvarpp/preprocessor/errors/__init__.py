"""Errors collections that preprocessor may raise (user-facing ones)."""

from .directive_syntax import DirectiveSyntaxError
from .empty_source import EmptySourceError
from .unknown_directive import UnknownDirectiveError
from .unterminated_conditional import UnterminatedConditionalError

__all__ = [
    "DirectiveSyntaxError",
    "EmptySourceError",
    "UnknownDirectiveError",
    "UnterminatedConditionalError",
]
