import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libvarpp.exceptions import VarppError
from varpp.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_varpp_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit Varpp errors as user-friendly ones."""
    try:
        yield
    except VarppError as ve:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(ve))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except OSError as oe:
        filename = oe.filename if oe.filename is not None else "<unknown>"
        return cli_fatal_abort(f"I/O failure on '{filename}': {oe.strerror or oe}")
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
