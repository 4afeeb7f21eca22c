from libvarpp.exceptions import VarppError


class EmptySourceError(VarppError):
    @property
    def reason(self) -> str:
        return "empty input buffer"

    def __repr__(self) -> str:
        return f"""Passed an empty input buffer to preprocess!

{self.generic_error_name}"""
