"""Goals for CLI (e.g preprocess, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from varpp.cli.goals.evaluate import cli_perform_evaluate_goal
from varpp.cli.goals.preprocess import cli_perform_preprocess_goal
from varpp.cli.goals.version import cli_perform_version_goal
from varpp.cli.output import cli_message
from varpp.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into preprocess goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.evaluate is not None:
            return cli_perform_evaluate_goal(args)

        return cli_perform_preprocess_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
