from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libvarpp.location import SourceLocation

from .conditions import ConditionalBlocksStack
from .output import OutputBuffers

if TYPE_CHECKING:
    from pathlib import Path

    from .config import PreprocessorConfig
    from .macros import MacrosRegistry


@dataclass(frozen=False)
class PreprocessorState:
    """State of an single preprocessing invocation, never shared between invocations."""

    config: PreprocessorConfig
    macros: MacrosRegistry

    path: Path | None = None

    conditions: ConditionalBlocksStack = field(default_factory=ConditionalBlocksStack)
    outputs: OutputBuffers = field(default_factory=OutputBuffers)

    # 1-based number of an line that is being processed (zero before first line)
    line_number: int = 0

    def current_location(self) -> SourceLocation:
        return SourceLocation(
            line_number=max(self.line_number, 1),
            filepath=self.path,
        )
