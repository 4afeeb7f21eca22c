from .expander import try_expand_macros_in_line
from .macro import Macro, MacroValue
from .registry import MacrosRegistry, registry_from_definitions

__all__ = [
    "Macro",
    "MacroValue",
    "MacrosRegistry",
    "registry_from_definitions",
    "try_expand_macros_in_line",
]
