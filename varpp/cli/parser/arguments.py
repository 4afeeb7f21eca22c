from dataclasses import dataclass
from pathlib import Path

from libvarpp.preprocessor import PreprocessorConfig
from libvarpp.preprocessor.macros import MacroValue


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Varpp toolchain process."""

    # Goals
    version: bool
    evaluate: str | None

    source_filepath: Path | None

    # Output file (template for multiple buffers), or stdout if not specified
    output_filepath: Path | None
    # Only single buffer is emitted when specified
    output_index: int | None

    # Ordered as given, first definition of an name wins
    definitions: list[tuple[str, MacroValue]]
    toolchain_definitions: bool

    preprocessor: PreprocessorConfig

    verbose: bool
    cli_debug_user_friendly_errors: bool
