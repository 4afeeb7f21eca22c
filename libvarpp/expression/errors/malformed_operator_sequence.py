from libvarpp.exceptions import VarppError


class MalformedOperatorSequenceError(VarppError):
    def __init__(self, expression: str, sequence: str, *, expected_expression: bool = False) -> None:
        self.expression = expression
        self.sequence = sequence
        self.expected_expression = expected_expression

    @property
    def reason(self) -> str:
        if self.expected_expression:
            return f"expected expression (operator) before '{self.sequence}'"
        return f"failed to parse operator sequence '{self.sequence}'"

    def __repr__(self) -> str:
        return f"""Malformed operator sequence '{self.sequence}' in expression at {self.at}!

Expression: '{self.expression}'
Operands must be separated with exactly one binary operator.
Unary operators are not supported, `-a` must be written as `0 - a`.

{self.generic_error_name}"""
