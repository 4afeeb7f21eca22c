from libvarpp.exceptions import VarppError


class ExpressionEvaluationFailureError(VarppError):
    def __init__(self, expression: str, details: str) -> None:
        self.expression = expression
        self.details = details

    @property
    def reason(self) -> str:
        return f"malformed expression ({self.details})"

    def __repr__(self) -> str:
        return f"""Failed to evaluate expression at {self.at}!

Expression: '{self.expression}'
{self.details.capitalize()}.

{self.generic_error_name}"""
