from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, cast

from libvarpp.expression.integers import parse_wrapping_decimal, wrap_integer
from libvarpp.preprocessor import PreprocessorConfig, merge_into_preprocessor_config
from varpp.cli.output import cli_fatal_abort
from varpp.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

    from libvarpp.preprocessor.macros import MacroValue

_INTEGER_DEFINITION_PATTERN = re.compile(r"(-?)([0-9]+)")


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    source_filepath = _process_source_filepath(args)
    output_filepath = _process_output_path(source_filepath, args)
    output_index = _process_output_index(args)
    definitions = _process_definitions(args)
    preprocessor = _process_preprocessor_config(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        evaluate=cast("str | None", args.evaluate),
        # Rest of these are mostly goal-specific
        source_filepath=source_filepath,
        output_filepath=output_filepath,
        output_index=output_index,
        definitions=definitions,
        toolchain_definitions=bool(args.toolchain_definitions),
        preprocessor=preprocessor,
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def parse_raw_definition(raw_definition: str) -> tuple[str, MacroValue]:
    """Parse CLI definition as `NAME` (defaults to `1`) or `NAME=VALUE` where value is an integer or text."""
    if "=" not in raw_definition:
        return raw_definition, 1

    name, value = raw_definition.split("=", maxsplit=1)
    if integer := _INTEGER_DEFINITION_PATTERN.fullmatch(value):
        # Integers wrap into expression range, as they would when written inline
        sign, digits = integer.groups()
        magnitude = parse_wrapping_decimal(digits)
        return name, wrap_integer(-magnitude) if sign else magnitude
    return name, value


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([bool(args.version), args.evaluate is not None]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_definitions(args: Namespace) -> list[tuple[str, MacroValue]]:
    """Process CLI propagated definitions in order they are given."""
    raw_definitions = cast("list[str]", args.definitions)
    return [parse_raw_definition(raw) for raw in raw_definitions]


def _process_source_filepath(args: Namespace) -> Path | None:
    """Process input source file as path and validate it."""
    goal_requires_source = not args.version and args.evaluate is None
    path = Path(args.source_file) if args.source_file else None
    if not goal_requires_source:
        return path

    if path is None:
        return cli_fatal_abort("Expected source file to preprocess!")

    if not path.is_file():
        return cli_fatal_abort(
            text=f"Input source file '{path}' does not exist or is not a file, aborting as safe mechanism.",
        )

    return path


def _process_output_path(source_filepath: Path | None, args: Namespace) -> Path | None:
    if not args.output:
        return None

    output = Path(args.output)
    if source_filepath is not None and output.resolve() == source_filepath.resolve():
        return cli_fatal_abort(
            text="Specified output file path will rewrite existing input file, please specify another output path.",
        )
    return output


def _process_output_index(args: Namespace) -> int | None:
    if args.output_index is None:
        return None

    if args.output_index < 0:
        return cli_fatal_abort("Output index must be non-negative!")
    return int(args.output_index)


def _process_preprocessor_config(args: Namespace) -> PreprocessorConfig:
    """Process preprocessor configuration from CLI into config."""
    try:
        return merge_into_preprocessor_config(
            PreprocessorConfig(),
            args,
            prefix="preprocessor",
        )
    except ValueError as e:
        return cli_fatal_abort(str(e))
