from libvarpp.exceptions import VarppError


class DivisionByZeroError(VarppError):
    def __init__(self, expression: str, dividend: int, operator: str) -> None:
        self.expression = expression
        self.dividend = dividend
        self.operator = operator

    @property
    def reason(self) -> str:
        return "division by zero"

    def __repr__(self) -> str:
        return f"""Division by zero (`{self.dividend} {self.operator} 0`) in expression at {self.at}!

Expression: '{self.expression}'

{self.generic_error_name}"""
