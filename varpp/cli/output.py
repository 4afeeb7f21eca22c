import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

_ANSI_RESET = "\033[0m"
_LEVEL_TO_ANSI_COLOR: dict[MESSAGE_LEVEL, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}


def cli_message(level: MESSAGE_LEVEL, text: str, *, verbose: bool = True) -> None:
    """Emit an message to the user (into stderr, as stdout is reserved for preprocessed output).

    INFO messages are emitted only in verbose mode.
    """
    if level == "INFO" and not verbose:
        return

    if sys.stderr.isatty():
        tag = f"{_LEVEL_TO_ANSI_COLOR[level]}[{level}]{_ANSI_RESET}"
    else:
        tag = f"[{level}]"
    print(f"{tag} {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and exit with failure code."""
    cli_message("ERROR", text)
    sys.exit(1)
