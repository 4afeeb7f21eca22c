from libvarpp.exceptions import VarppError


class IllegalCharacterError(VarppError):
    def __init__(self, expression: str, character: str) -> None:
        self.expression = expression
        self.character = character

    @property
    def reason(self) -> str:
        return f"illegal character {self.character!r} in expression"

    def __repr__(self) -> str:
        return f"""Illegal character {self.character!r} in expression at {self.at}!

Expression: '{self.expression}'
Expressions may only contain integers, identifiers, spaces and operators (`( ) * / % + - < > = ! | ^ &`).

{self.generic_error_name}"""
