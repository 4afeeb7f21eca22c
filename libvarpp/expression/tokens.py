from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TypeAlias


class Precedence(IntEnum):
    """Precedence tier of an binary operator, lower tier binds tighter.

    Follows C operator precedence:
    https://en.cppreference.com/w/c/language/operator_precedence
    Parentheses are not a tier, they are handled structurally by resolver.
    """

    # Not a valid operator by itself (`=`, `!`), only used while tokenizing
    NONE = 0

    MULTIPLY_DIVIDE = 1
    ADD_SUBTRACT = 2
    BIT_SHIFT = 3
    RELATIONAL = 4
    EQUALITY = 5
    BIT_AND = 6
    BIT_XOR = 7
    BIT_OR = 8
    LOGICAL_AND = 9
    LOGICAL_OR = 10


class OperatorCode(Enum):
    """Identity of an operator, value is an symbol as it is written in expression."""

    PAREN_LEFT = "("
    PAREN_RIGHT = ")"

    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"

    ADD = "+"
    SUBTRACT = "-"

    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"

    LESSER = "<"
    GREATER = ">"
    LESSER_EQUAL = "<="
    GREATER_EQUAL = ">="

    EQUAL = "=="
    NOT_EQUAL = "!="

    BIT_AND = "&"
    BIT_XOR = "^"
    BIT_OR = "|"

    LOGICAL_AND = "&&"
    LOGICAL_OR = "||"

    # Only used when tokenizing as first half of an two-character operator
    ASSIGN = "="
    NOT = "!"


OPERATOR_PRECEDENCE: dict[OperatorCode, Precedence] = {
    OperatorCode.MULTIPLY: Precedence.MULTIPLY_DIVIDE,
    OperatorCode.DIVIDE: Precedence.MULTIPLY_DIVIDE,
    OperatorCode.REMAINDER: Precedence.MULTIPLY_DIVIDE,
    OperatorCode.ADD: Precedence.ADD_SUBTRACT,
    OperatorCode.SUBTRACT: Precedence.ADD_SUBTRACT,
    OperatorCode.SHIFT_LEFT: Precedence.BIT_SHIFT,
    OperatorCode.SHIFT_RIGHT: Precedence.BIT_SHIFT,
    OperatorCode.LESSER: Precedence.RELATIONAL,
    OperatorCode.GREATER: Precedence.RELATIONAL,
    OperatorCode.LESSER_EQUAL: Precedence.RELATIONAL,
    OperatorCode.GREATER_EQUAL: Precedence.RELATIONAL,
    OperatorCode.EQUAL: Precedence.EQUALITY,
    OperatorCode.NOT_EQUAL: Precedence.EQUALITY,
    OperatorCode.BIT_AND: Precedence.BIT_AND,
    OperatorCode.BIT_XOR: Precedence.BIT_XOR,
    OperatorCode.BIT_OR: Precedence.BIT_OR,
    OperatorCode.LOGICAL_AND: Precedence.LOGICAL_AND,
    OperatorCode.LOGICAL_OR: Precedence.LOGICAL_OR,
}

# Single characters that starts an operator token
SYMBOL_TO_OPERATOR: dict[str, OperatorCode] = {
    code.value: code for code in OperatorCode if len(code.value) == 1
}

# (first, second) -> merged two-character operator
OPERATOR_MERGES: dict[tuple[OperatorCode, OperatorCode], OperatorCode] = {
    (OperatorCode.LESSER, OperatorCode.ASSIGN): OperatorCode.LESSER_EQUAL,
    (OperatorCode.GREATER, OperatorCode.ASSIGN): OperatorCode.GREATER_EQUAL,
    (OperatorCode.ASSIGN, OperatorCode.ASSIGN): OperatorCode.EQUAL,
    (OperatorCode.NOT, OperatorCode.ASSIGN): OperatorCode.NOT_EQUAL,
    (OperatorCode.BIT_OR, OperatorCode.BIT_OR): OperatorCode.LOGICAL_OR,
    (OperatorCode.BIT_AND, OperatorCode.BIT_AND): OperatorCode.LOGICAL_AND,
    (OperatorCode.LESSER, OperatorCode.LESSER): OperatorCode.SHIFT_LEFT,
    (OperatorCode.GREATER, OperatorCode.GREATER): OperatorCode.SHIFT_RIGHT,
}


@dataclass(frozen=True)
class Operand:
    """Integer operand of an expression."""

    value: int


@dataclass(frozen=True)
class Operator:
    """Operator of an expression, precedence is known only after resolving."""

    code: OperatorCode
    precedence: Precedence | None = None

    def with_precedence(self) -> Operator:
        return Operator(
            code=self.code,
            precedence=OPERATOR_PRECEDENCE.get(self.code, Precedence.NONE),
        )

    @property
    def is_paren_left(self) -> bool:
        return self.code == OperatorCode.PAREN_LEFT

    @property
    def is_paren_right(self) -> bool:
        return self.code == OperatorCode.PAREN_RIGHT


ExpressionToken: TypeAlias = Operand | Operator
