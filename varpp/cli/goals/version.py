import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libvarpp.consts import VARPP_VERSION
from varpp.cli.definitions import construct_propagated_toolchain_definitions
from varpp.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Varpp toolchain]")
    print(f"\tVersion: {VARPP_VERSION}")
    print(f"\tDirective prefix: {args.preprocessor.directive_prefix!r}")
    print(f"\tUnknown directives: {args.preprocessor.unknown_directive_policy}")
    print("Toolchain definitions:")
    for name, value in construct_propagated_toolchain_definitions():
        print(f"\t{name} = {value!r}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
