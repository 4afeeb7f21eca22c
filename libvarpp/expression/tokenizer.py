"""Expression tokenizer, converts (already macro-expanded) expression text into tokens."""

from __future__ import annotations

import re

from libvarpp.expression.errors import (
    IllegalCharacterError,
    MalformedOperatorSequenceError,
)
from libvarpp.expression.integers import parse_wrapping_decimal
from libvarpp.expression.tokens import (
    OPERATOR_MERGES,
    SYMBOL_TO_OPERATOR,
    ExpressionToken,
    Operand,
    Operator,
    OperatorCode,
)

# Printable ASCII range that expressions may consist of (excluding reserved symbols below)
LEGAL_CHARACTERS_RANGE = (" ", "|")
RESERVED_CHARACTERS = frozenset("{}[]@?;:.`'\"$#\\")

# Operators after which another single-character operator may start a new token
# (e.g `a > (b)` or `(a) + b`), any other operator must be followed by an operand or `(`
CONTINUABLE_OPERATORS = frozenset(
    {
        OperatorCode.LESSER,
        OperatorCode.GREATER,
        OperatorCode.ASSIGN,
        OperatorCode.NOT,
        OperatorCode.BIT_OR,
        OperatorCode.BIT_AND,
        OperatorCode.PAREN_RIGHT,
    },
)

_OPERATOR_SYMBOLS = re.escape("".join(SYMBOL_TO_OPERATOR))
_LEXEME_PATTERN = re.compile(
    rf"(?P<operator>[{_OPERATOR_SYMBOLS}])|(?P<space> +)|(?P<word>[^{_OPERATOR_SYMBOLS} ]+)",
)
_DECIMAL_PATTERN = re.compile(r"[0-9]+")


def is_legal_character(character: str) -> bool:
    low, high = LEGAL_CHARACTERS_RANGE
    return low <= character <= high and character not in RESERVED_CHARACTERS


def tokenize_expression(expression: str) -> list[ExpressionToken]:
    """Tokenize expression into operands and operators in order they are written.

    Words that are not decimal integers (e.g non-expanded identifiers) silently becomes zero.
    :raises IllegalCharacterError: if expression contains character outside of allowed set.
    :raises MalformedOperatorSequenceError: on consecutive operands or invalid operator sequence.
    """
    for character in expression:
        if not is_legal_character(character):
            raise IllegalCharacterError(expression=expression, character=character)

    tokens: list[ExpressionToken] = []
    for lexeme in _LEXEME_PATTERN.finditer(expression):
        match lexeme.lastgroup:
            case "operator":
                _push_operator(tokens, lexeme.group(), expression)
            case "word":
                _push_operand(tokens, lexeme.group(), expression)
            case "space":
                continue
    return tokens


def _push_operand(tokens: list[ExpressionToken], word: str, expression: str) -> None:
    if tokens and isinstance(tokens[-1], Operand):
        raise MalformedOperatorSequenceError(
            expression=expression,
            sequence=word,
            expected_expression=True,
        )

    value = parse_wrapping_decimal(word) if _DECIMAL_PATTERN.fullmatch(word) else 0
    tokens.append(Operand(value=value))


def _push_operator(tokens: list[ExpressionToken], symbol: str, expression: str) -> None:
    code = SYMBOL_TO_OPERATOR[symbol]
    previous = tokens[-1] if tokens else None

    # Open parenthesis is always an new token, and anything after operand starts new operator
    if code == OperatorCode.PAREN_LEFT or not isinstance(previous, Operator):
        tokens.append(Operator(code=code))
        return

    if merged := OPERATOR_MERGES.get((previous.code, code)):
        tokens[-1] = Operator(code=merged)
        return

    if previous.code in CONTINUABLE_OPERATORS and code != OperatorCode.PAREN_RIGHT:
        tokens.append(Operator(code=code))
        return

    # `))`, `()`, `+-`, `*)` and so on
    raise MalformedOperatorSequenceError(
        expression=expression,
        sequence=previous.code.value + symbol,
    )
