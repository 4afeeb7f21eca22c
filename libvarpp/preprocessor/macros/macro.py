from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

MacroValue: TypeAlias = int | str


@dataclass(frozen=True)
class Macro:
    """Preprocessor macro definition for text substitution and conditional evaluation.

    Macros are named values that are expanded when name of an macro is encountered
    as an whole word within any line (including directive lines), e.g:
    `VERSION` defined as `3`:
    `#if VERSION >= 2` -> `#if 3 >= 2`
    `version: VERSION` -> `version: 3`

    Expansion is single-pass and non-recursive, expanded text is never re-scanned.

    Macros cannot be defined or redefined within source text, they only come from
    the caller (or CLI `-D` flags) and stay immutable for whole preprocessing.
    """

    name: str

    # Integers are expanded as decimal representation, strings as-is
    value: MacroValue

    @property
    def expansion(self) -> str:
        """Text that name of an macro is replaced with."""
        if isinstance(self.value, int):
            # `int()` also makes booleans expand as `1` / `0`
            return str(int(self.value))
        return self.value
