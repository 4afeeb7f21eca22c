from argparse import ArgumentParser

from varpp.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Varpp Toolkit - CLI for preprocessing text into build variants",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input source file to preprocess",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    parser.add_argument(
        "--evaluate",
        "-e",
        required=False,
        default=None,
        metavar="EXPRESSION",
        help="Evaluate given expression (with macros expanded) and emit its value instead of preprocessing",
    )

    groups.add_output_group(parser)
    groups.add_preprocessor_group(parser)
    groups.add_debug_group(parser)
    return parser
