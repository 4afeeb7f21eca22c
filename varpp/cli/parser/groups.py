from argparse import ArgumentParser


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Where preprocessed output buffers goes")

    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Path to output file, when there is several output buffers index is inserted before suffix (e.g `out.1.txt`). Defaults to stdout",
    )

    group.add_argument(
        "--output-index",
        "-O",
        type=int,
        required=False,
        default=None,
        help="Emit only output buffer with that index (as selected by `#output` directive)",
    )


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with preprocessor options into given parser."""
    group = parser.add_argument_group("Preprocessor", "Definitions and directives")

    group.add_argument(
        "--define",
        "-D",
        dest="definitions",
        required=False,
        help="Define macro for preprocessor (e.g `-DDEBUG`, `-DLEVEL=2` or `-DNAME=text`). Multiple allowed",
        action="append",
        default=[],
    )

    group.add_argument(
        "--no-toolchain-definitions",
        dest="toolchain_definitions",
        action="store_false",
        default=True,
        help="If passed, toolchain definitions (e.g `__VARPP__`, `OS_LINUX`) will not be propagated",
    )

    group.add_argument(
        "--directive-prefix",
        dest="preprocessor_directive_prefix",
        required=False,
        default=None,
        help="Prefix of directive lines (defaults to `#`)",
    )

    group.add_argument(
        "--unknown-directives",
        dest="preprocessor_unknown_directive_policy",
        choices=["fail", "append"],
        required=False,
        default=None,
        help="Whether unknown directive fails preprocessing or is treated as text line (defaults to `fail`)",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Logging and debugging")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from toolchain.",
    )

    group.add_argument(
        "--cli-debug-unfriendly-errors",
        dest="cli_debug_user_friendly_errors",
        required=False,
        action="store_false",
        default=True,
        help="If passed, errors will be re-raised with traceback instead of user-friendly message (for debugging toolchain).",
    )
