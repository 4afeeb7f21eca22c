from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libvarpp.exceptions import VarppError

from ._state import PreprocessorState
from .config import PreprocessorConfig
from .directives import (
    DIRECTIVE_WHITESPACE,
    DIRECTIVES_WITH_VALUE,
    WORD_TO_PREPROCESSOR_DIRECTIVE,
    PreprocessorDirective,
    split_directive_line,
)
from .errors import DirectiveSyntaxError, EmptySourceError, UnknownDirectiveError
from .macros import registry_from_definitions, try_expand_macros_in_line
from .output import MAX_OUTPUT_BUFFER_INDEX

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path

    from .macros import MacroValue

LINE_SEPARATOR = "\n"


@dataclass(frozen=True)
class PreprocessResult:
    """Outcome of an preprocessing, either all output buffers or an error (never partial output)."""

    outputs: list[str] = field(default_factory=list)
    error: VarppError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        """Get output buffers or raise an error that preprocessing failed with."""
        if self.error is not None:
            raise self.error
        return self.outputs


class Preprocessor:
    """Line-oriented text preprocessor with conditional directives and macro substitution.

    Definitions are immutable between `parse` invocations, each invocation builds
    its own symbol table from them so single instance may be shared.
    """

    def __init__(
        self,
        definitions: Iterable[tuple[str, MacroValue]] = (),
        *,
        config: PreprocessorConfig | None = None,
    ) -> None:
        self._definitions = tuple(definitions)
        self.config = config or PreprocessorConfig()

        # Validate definitions early, before any parse
        registry_from_definitions(self._definitions)

    @property
    def definitions(self) -> tuple[tuple[str, MacroValue], ...]:
        return self._definitions

    def define(self, name: str, value: MacroValue = 1) -> None:
        """Append an global definition, it is used by all later `parse` invocations."""
        registry_from_definitions([(name, value)])
        self._definitions = (*self._definitions, (name, value))

    def parse(self, text: str, *, path: Path | None = None) -> PreprocessResult:
        """Preprocess text into output buffers, capturing any failure into result."""
        try:
            return PreprocessResult(outputs=self.parse_or_raise(text, path=path))
        except VarppError as e:
            return PreprocessResult(error=e)

    def parse_or_raise(self, text: str, *, path: Path | None = None) -> list[str]:
        """Preprocess text into output buffers.

        :raises VarppError: on first failure, with location of an line that caused it.
        """
        state = PreprocessorState(
            config=self.config,
            macros=registry_from_definitions(self._definitions),
            path=path,
        )
        preprocess_lines(state, text)
        return state.outputs.collect()


def preprocess_text(
    text: str,
    definitions: Iterable[tuple[str, MacroValue]] = (),
    *,
    config: PreprocessorConfig | None = None,
) -> PreprocessResult:
    """Preprocess text with given definitions, shortcut for single-use `Preprocessor`."""
    try:
        preprocessor = Preprocessor(definitions, config=config)
    except VarppError as e:
        return PreprocessResult(error=e)
    return preprocessor.parse(text)


def preprocess_lines(state: PreprocessorState, text: str) -> None:
    """Preprocess whole text line by line into state output buffers."""
    if not text:
        raise EmptySourceError

    for line in split_source_lines(text):
        state.line_number += 1
        with _attach_error_location(state):
            _preprocess_line(state, line)

    with _attach_error_location(state):
        state.conditions.ensure_terminated()


def split_source_lines(text: str) -> list[str]:
    """Split text into physical lines, trailing line separator does not produce an empty line."""
    lines = text.split(LINE_SEPARATOR)
    if text.endswith(LINE_SEPARATOR):
        lines.pop()
    return lines


@contextmanager
def _attach_error_location(state: PreprocessorState) -> Generator[None]:
    """Propagate errors with current line location (errors from expression engine has none)."""
    try:
        yield
    except VarppError as e:
        if e.location is None:
            e.location = state.current_location()
        raise


def _preprocess_line(state: PreprocessorState, line: str) -> None:
    if (expanded := try_expand_macros_in_line(line, state.macros)) is not None:
        line = expanded

    if line.startswith(state.config.directive_prefix) and _resolve_directive(state, line):
        return

    if state.conditions.is_emitting:
        state.outputs.append_line(line)


def _resolve_directive(state: PreprocessorState, line: str) -> bool:
    """Resolve directive line into state.

    :returns consumed: False if line is an unknown directive that must be treated as text.
    """
    word, value = split_directive_line(line.removeprefix(state.config.directive_prefix))

    if (directive := WORD_TO_PREPROCESSOR_DIRECTIVE.get(word)) is None:
        if state.config.unknown_directive_policy == "append":
            return False
        raise UnknownDirectiveError(directive=word or line, line=line)

    if directive in DIRECTIVES_WITH_VALUE and (
        not value.startswith(tuple(DIRECTIVE_WHITESPACE)) or not value.strip(DIRECTIVE_WHITESPACE)
    ):
        raise DirectiveSyntaxError(directive=word, details="expected value in directive")

    match directive:
        case PreprocessorDirective.IF:
            state.conditions.resolve_if(value)
        case PreprocessorDirective.ELIF:
            state.conditions.resolve_elif(value)
        case PreprocessorDirective.ELSE:
            state.conditions.resolve_else()
        case PreprocessorDirective.END_IF:
            state.conditions.resolve_endif()
        case PreprocessorDirective.OUTPUT:
            _resolve_output_directive(state, value)
    return True


def _resolve_output_directive(state: PreprocessorState, value: str) -> None:
    index = value.lstrip(DIRECTIVE_WHITESPACE)
    if not index.isascii() or not index.isdigit():
        raise DirectiveSyntaxError(
            directive="output",
            details=f"expected non-negative integer output index but got '{index}'",
        )

    # Compare length first, numerals may be too long for an integer conversion
    digits = index.lstrip("0") or "0"
    if len(digits) > len(str(MAX_OUTPUT_BUFFER_INDEX)) or int(digits) > MAX_OUTPUT_BUFFER_INDEX:
        raise DirectiveSyntaxError(
            directive="output",
            details=f"output index {digits} is greater than maximum of {MAX_OUTPUT_BUFFER_INDEX}",
        )

    # Output switches inside not taken branches are ignored (but still validated)
    if state.conditions.is_emitting:
        state.outputs.select(int(digits))
