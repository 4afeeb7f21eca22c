from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of an line within preprocessed source buffer."""

    # Line numbers are 1-based as they are shown to the user as-is
    line_number: int

    filepath: Path | None = None

    def __post_init__(self) -> None:
        assert self.line_number >= 1, "Line numbers are 1-based"

    def __repr__(self) -> str:
        if self.filepath is None:
            return f"'<buffer>:{self.line_number}'"
        return f"'{self.filepath.name}:{self.line_number}'"
