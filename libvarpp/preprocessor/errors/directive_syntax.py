from libvarpp.exceptions import VarppError


class DirectiveSyntaxError(VarppError):
    def __init__(self, directive: str, details: str) -> None:
        self.directive = directive
        self.details = details

    @property
    def reason(self) -> str:
        return f"{self.details} (in `{self.directive}` directive)"

    def __repr__(self) -> str:
        return f"""Invalid `{self.directive}` directive at {self.at}!

{self.details.capitalize()}.

{self.generic_error_name}"""
