from libvarpp.exceptions import VarppError


class InvalidDefinitionNameError(VarppError):
    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def reason(self) -> str:
        return f"invalid macro definition name {self.name!r}"

    def __repr__(self) -> str:
        return f"""Invalid macro definition name {self.name!r}!

Macro names must consist only of letters, digits and underscores (`[A-Za-z0-9_]`),
otherwise they never be matched as an whole word.

{self.generic_error_name}"""
