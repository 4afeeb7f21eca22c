import pytest

from libvarpp.expression.errors import MismatchedParenthesisError
from libvarpp.expression.shunting_yard import resolve_operator_precedence
from libvarpp.expression.tokenizer import tokenize_expression
from libvarpp.expression.tokens import Operand, Operator, OperatorCode, Precedence


def _rpn(expression: str) -> list[str]:
    rendered: list[str] = []
    for token in resolve_operator_precedence(tokenize_expression(expression)):
        match token:
            case Operand(value=value):
                rendered.append(str(value))
            case Operator(code=code):
                rendered.append(code.value)
    return rendered


def test_resolve_precedence() -> None:
    assert _rpn("2+3*4") == ["2", "3", "4", "*", "+"]
    assert _rpn("2*3+4") == ["2", "3", "*", "4", "+"]


def test_resolve_left_associativity() -> None:
    assert _rpn("8-4-2") == ["8", "4", "-", "2", "-"]


def test_resolve_parentheses() -> None:
    assert _rpn("(2+3)*4") == ["2", "3", "+", "4", "*"]


def test_resolve_logical_below_comparison() -> None:
    assert _rpn("1==1&&0!=1") == ["1", "1", "==", "0", "1", "!=", "&&"]


def test_resolve_assigns_precedence() -> None:
    queue = resolve_operator_precedence(tokenize_expression("1 || 2"))
    operator = queue[-1]
    assert isinstance(operator, Operator)
    assert operator.code == OperatorCode.LOGICAL_OR
    assert operator.precedence == Precedence.LOGICAL_OR


def test_resolve_unmatched_closing_parenthesis() -> None:
    with pytest.raises(MismatchedParenthesisError):
        resolve_operator_precedence(tokenize_expression("3+4)"))


def test_resolve_dangling_open_parenthesis_is_dropped() -> None:
    assert _rpn("(1+2") == ["1", "2", "+"]
    # Operators below dangling parenthesis are dropped too
    assert _rpn("1*(2+3") == ["1", "2", "3", "+"]
