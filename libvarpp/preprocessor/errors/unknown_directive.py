from libvarpp.exceptions import VarppError


class UnknownDirectiveError(VarppError):
    def __init__(self, directive: str, line: str) -> None:
        self.directive = directive
        self.line = line

    @property
    def reason(self) -> str:
        return f"unknown directive `{self.directive}`"

    def __repr__(self) -> str:
        return f"""Unknown directive `{self.directive}` at {self.at}!

Line: '{self.line}'
Known directives are `if`, `elif`, `else`, `endif` and `output`.
Unknown directives may be passed through as text with an `append` unknown directive policy.

{self.generic_error_name}"""
