from libvarpp.exceptions import VarppError


class UnterminatedConditionalError(VarppError):
    def __init__(self, unclosed_count: int) -> None:
        self.unclosed_count = unclosed_count

    @property
    def reason(self) -> str:
        return "unterminated conditional directive"

    def __repr__(self) -> str:
        return f"""Unterminated conditional directive, reached end of input at {self.at}!

{self.unclosed_count} conditional block(s) are left open.
Did you forgot to close `if` block with an `endif`?

{self.generic_error_name}"""
