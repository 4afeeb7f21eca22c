"""Entry point for CLI.

Only for calling via `python -m varpp`, prefer installed `varpp` executable.
"""

from varpp.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
