from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .errors import InvalidDefinitionNameError
from .macro import Macro

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .macro import MacroValue

# Same as word characters that macro expander matches
MACRO_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


class MacrosRegistry(dict[str, Macro]):
    """Top-level preprocessor mapping of macros (symbol table)."""

    def define(self, name: str, value: MacroValue) -> Macro:
        """Register new macro, first definition of an name wins and later ones are ignored."""
        if not MACRO_NAME_PATTERN.fullmatch(name):
            raise InvalidDefinitionNameError(name=name)

        if original := self.get(name):
            return original

        macro = Macro(name=name, value=value)
        self.__setitem__(name, macro)
        return macro


def registry_from_definitions(definitions: Iterable[tuple[str, MacroValue]]) -> MacrosRegistry:
    """Construct new macros registry from ordered (name, value) definitions.

    Duplicated names are allowed and resolved as first-match-wins.
    """
    registry = MacrosRegistry()
    for name, value in definitions:
        registry.define(name, value)
    return registry
