from __future__ import annotations

import re
from enum import Enum, auto


class PreprocessorDirective(Enum):
    IF = auto()
    ELIF = auto()
    ELSE = auto()
    END_IF = auto()

    OUTPUT = auto()


WORD_TO_PREPROCESSOR_DIRECTIVE = {
    "if": PreprocessorDirective.IF,
    "elif": PreprocessorDirective.ELIF,
    "else": PreprocessorDirective.ELSE,
    "endif": PreprocessorDirective.END_IF,
    "output": PreprocessorDirective.OUTPUT,
}

# Directives that require an value (expression / index) after them
DIRECTIVES_WITH_VALUE = frozenset(
    {
        PreprocessorDirective.IF,
        PreprocessorDirective.ELIF,
        PreprocessorDirective.OUTPUT,
    },
)

DIRECTIVE_WORD_PATTERN = re.compile(r"[A-Za-z0-9_]*")

# Spaces and tabs between directive prefix, directive and its value
DIRECTIVE_WHITESPACE = " \t"


def split_directive_line(text: str) -> tuple[str, str]:
    """Split text after directive prefix into directive word and the rest (value) of an line.

    Whitespace between prefix and directive is skipped, value is returned untouched.
    """
    text = text.lstrip(DIRECTIVE_WHITESPACE)
    word = DIRECTIVE_WORD_PATTERN.match(text)
    assert word is not None, "Directive word pattern matches an empty string"
    return word.group(), text[word.end() :]
