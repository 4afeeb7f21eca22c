from __future__ import annotations

from dataclasses import dataclass

from libvarpp.preprocessor.directives import PreprocessorDirective


@dataclass(frozen=False)
class ConditionalBranch:
    """State of an single nesting level of `if` / `elif` / `else` / `endif` chain."""

    # Lines are emitted only while current branch is taken (and whole context is active)
    emit_now: bool

    # Has any branch in that chain been taken (first-match-wins)
    any_branch_matched: bool

    # Whether enclosing context is emitting (frozen at `if` time for whole chain)
    ancestors_active: bool

    # Directive that last changed that level (`if`, `elif` or `else`)
    last_directive: PreprocessorDirective = PreprocessorDirective.IF
