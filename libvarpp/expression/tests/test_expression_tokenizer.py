import pytest

from libvarpp.expression.errors import (
    IllegalCharacterError,
    MalformedOperatorSequenceError,
)
from libvarpp.expression.tokenizer import tokenize_expression
from libvarpp.expression.tokens import Operand, Operator, OperatorCode


def test_tokenize_operands_and_operators() -> None:
    assert tokenize_expression("2 + 3*4") == [
        Operand(2),
        Operator(OperatorCode.ADD),
        Operand(3),
        Operator(OperatorCode.MULTIPLY),
        Operand(4),
    ]


@pytest.mark.parametrize(
    ("expression", "code"),
    [
        ("1<=2", OperatorCode.LESSER_EQUAL),
        ("1>=2", OperatorCode.GREATER_EQUAL),
        ("1==2", OperatorCode.EQUAL),
        ("1!=2", OperatorCode.NOT_EQUAL),
        ("1||2", OperatorCode.LOGICAL_OR),
        ("1&&2", OperatorCode.LOGICAL_AND),
        ("1<<2", OperatorCode.SHIFT_LEFT),
        ("1>>2", OperatorCode.SHIFT_RIGHT),
    ],
)
def test_tokenize_merges_two_character_operators(
    expression: str,
    code: OperatorCode,
) -> None:
    assert tokenize_expression(expression) == [Operand(1), Operator(code), Operand(2)]


def test_tokenize_space_splits_two_character_operator() -> None:
    # Tokens are merged regardless of whitespace as whitespace produces no token
    assert tokenize_expression("1 = = 2")[1] == Operator(OperatorCode.EQUAL)


def test_tokenize_non_numeric_words_are_zero() -> None:
    assert tokenize_expression("UNDEFINED + 12ab") == [
        Operand(0),
        Operator(OperatorCode.ADD),
        Operand(0),
    ]


def test_tokenize_open_parenthesis_always_new_token() -> None:
    tokens = tokenize_expression("1 * ((2)")
    assert tokens == [
        Operand(1),
        Operator(OperatorCode.MULTIPLY),
        Operator(OperatorCode.PAREN_LEFT),
        Operator(OperatorCode.PAREN_LEFT),
        Operand(2),
        Operator(OperatorCode.PAREN_RIGHT),
    ]


def test_tokenize_operator_after_closing_parenthesis() -> None:
    tokens = tokenize_expression("(1)|(2)")
    assert tokens[3] == Operator(OperatorCode.BIT_OR)
    assert tokens[4] == Operator(OperatorCode.PAREN_LEFT)


def test_tokenize_consecutive_operands() -> None:
    with pytest.raises(MalformedOperatorSequenceError) as error:
        tokenize_expression("3 3")
    assert error.value.expected_expression


@pytest.mark.parametrize("expression", ["(1+2))", "(1+(2*3))", "1 + ()", "1 * -1", "1 == -1", "1 +* 2"])
def test_tokenize_malformed_operator_sequences(expression: str) -> None:
    with pytest.raises(MalformedOperatorSequenceError):
        tokenize_expression(expression)


@pytest.mark.parametrize("character", ["{", "}", "[", "]", "@", "?", ";", ":", ".", "`", "'", '"', "$", "#", "\\", "~", "\t", "\r"])
def test_tokenize_illegal_characters(character: str) -> None:
    with pytest.raises(IllegalCharacterError) as error:
        tokenize_expression(f"1 + 2 {character}")
    assert error.value.character == character


def test_tokenize_illegal_character_at_any_position() -> None:
    # Illegal character is detected before anything else is parsed
    with pytest.raises(IllegalCharacterError):
        tokenize_expression("3 3 .")


def test_tokenize_operand_wraps_to_integer_range() -> None:
    assert tokenize_expression("4294967297") == [Operand(1)]
    assert tokenize_expression("2147483648") == [Operand(-2147483648)]
    assert tokenize_expression("10000000000") == [Operand(1410065408)]


def test_tokenize_operand_longer_than_conversion_limit() -> None:
    assert tokenize_expression("0" * 4990 + "4294967297") == [Operand(1)]
    assert len(tokenize_expression("1" * 5000)) == 1


def test_tokenize_empty() -> None:
    assert tokenize_expression("") == []
    assert tokenize_expression("   ") == []
