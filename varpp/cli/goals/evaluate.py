from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libvarpp.expression import evaluate_expression
from libvarpp.preprocessor.macros import registry_from_definitions, try_expand_macros_in_line
from varpp.cli.goals._definitions import collect_goal_definitions
from varpp.cli.output import cli_message

if TYPE_CHECKING:
    from varpp.cli.parser.arguments import CLIArguments


def cli_perform_evaluate_goal(args: CLIArguments) -> NoReturn:
    """Perform evaluate goal that emits value of an expression (as `#if` would see it) into stdout."""
    assert args.evaluate is not None, "Cannot perform evaluate goal without expression!"

    macros = registry_from_definitions(collect_goal_definitions(args))
    expression = try_expand_macros_in_line(args.evaluate, macros)
    if expression is None:
        expression = args.evaluate
    cli_message(
        level="INFO",
        text=f"Evaluating expanded expression '{expression}'",
        verbose=args.verbose,
    )

    print(evaluate_expression(expression))
    return sys.exit(0)
