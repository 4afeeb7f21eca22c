from libvarpp.exceptions import VarppError


class MismatchedParenthesisError(VarppError):
    def __init__(self, expression: str) -> None:
        self.expression = expression

    @property
    def reason(self) -> str:
        return "mismatched parenthesis"

    def __repr__(self) -> str:
        return f"""Mismatched parenthesis in expression at {self.at}!

Expression: '{self.expression}'
Closing parenthesis `)` has no matching opening one `(`.

{self.generic_error_name}"""
