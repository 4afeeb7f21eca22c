from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libvarpp.preprocessor import Preprocessor
from varpp.cli.goals._definitions import collect_goal_definitions
from varpp.cli.output import cli_fatal_abort, cli_message

if TYPE_CHECKING:
    from pathlib import Path

    from varpp.cli.parser.arguments import CLIArguments


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess goal that emits output buffers into stdout or output file(s)."""
    assert args.source_filepath is not None, "Cannot perform preprocess goal without source file!"

    cli_message(
        level="INFO",
        text=f"Preprocessing '{args.source_filepath}'...",
        verbose=args.verbose,
    )

    text = args.source_filepath.read_text(encoding="utf-8")
    preprocessor = Preprocessor(collect_goal_definitions(args), config=args.preprocessor)
    outputs = preprocessor.parse(text, path=args.source_filepath).unwrap()

    cli_message(
        level="INFO",
        text=f"Preprocessed into {len(outputs)} output buffer(s)",
        verbose=args.verbose,
    )

    selected = _select_output_buffers(outputs, args.output_index)

    if args.output_filepath is None:
        for buffer in selected.values():
            sys.stdout.write(buffer)
        return sys.exit(0)

    is_single_output = len(selected) == 1
    for index, buffer in selected.items():
        path = infer_output_buffer_filepath(
            args.output_filepath,
            index,
            is_single_output=is_single_output,
        )
        path.write_text(buffer, encoding="utf-8")
        cli_message(
            level="INFO",
            text=f"Output buffer #{index} written into '{path}'",
            verbose=args.verbose,
        )
    return sys.exit(0)


def infer_output_buffer_filepath(output: Path, index: int, *, is_single_output: bool) -> Path:
    """Infer path for output buffer, several buffers get their index inserted before suffix."""
    if is_single_output:
        return output
    return output.with_suffix(f".{index}{output.suffix}")


def _select_output_buffers(outputs: list[str], output_index: int | None) -> dict[int, str]:
    if output_index is None:
        return dict(enumerate(outputs))

    if output_index >= len(outputs):
        return cli_fatal_abort(
            f"Output buffer #{output_index} was never selected (there is only {len(outputs)} output buffer(s))!",
        )
    return {output_index: outputs[output_index]}
