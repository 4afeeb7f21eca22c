from __future__ import annotations

import re
from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libvarpp.location import SourceLocation


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class VarppError(Exception):
    """Parent for all Varpp errors (exceptions).

    Errors raised deep inside expression engine does not know where they come from,
    so `location` is attached later by the line driver (if not set by the raiser itself).
    """

    location: SourceLocation | None = None

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    def __str__(self) -> str:
        return self.reason

    @property
    def reason(self) -> str:
        """Short single-line human readable reason of an error."""
        return self.generic_error_name

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"

    @property
    def at(self) -> str:
        """Location of an error for user-facing messages."""
        if self.location is None:
            return "'(expression)'"
        return repr(self.location)
