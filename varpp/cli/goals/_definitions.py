from __future__ import annotations

from typing import TYPE_CHECKING

from varpp.cli.definitions import construct_propagated_toolchain_definitions

if TYPE_CHECKING:
    from libvarpp.preprocessor.macros import MacroValue
    from varpp.cli.parser.arguments import CLIArguments


def collect_goal_definitions(args: CLIArguments) -> list[tuple[str, MacroValue]]:
    """User definitions followed by toolchain ones (first definition wins, so user may override toolchain)."""
    if not args.toolchain_definitions:
        return list(args.definitions)
    return [*args.definitions, *construct_propagated_toolchain_definitions()]
