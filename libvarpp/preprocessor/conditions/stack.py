from __future__ import annotations

from libvarpp.expression import evaluate_expression
from libvarpp.preprocessor.directives import PreprocessorDirective
from libvarpp.preprocessor.errors import (
    DirectiveSyntaxError,
    UnterminatedConditionalError,
)

from .branch import ConditionalBranch


class ConditionalBlocksStack(list[ConditionalBranch]):
    """Stack of nested conditional blocks, empty when not inside any `if`.

    Conditions are always evaluated (even inside not taken branches),
    so malformed expressions are reported regardless of nesting.
    """

    @property
    def is_emitting(self) -> bool:
        """Whether lines at current nesting must be emitted."""
        return not self or self[-1].emit_now

    def resolve_if(self, expression: str) -> None:
        condition = _evaluate_condition(expression)
        ancestors_active = self.is_emitting
        self.append(
            ConditionalBranch(
                emit_now=condition and ancestors_active,
                any_branch_matched=condition,
                ancestors_active=ancestors_active,
            ),
        )

    def resolve_elif(self, expression: str) -> None:
        branch = self._current_chain_branch("elif")
        condition = _evaluate_condition(expression)

        branch.emit_now = not branch.any_branch_matched and condition and branch.ancestors_active
        branch.any_branch_matched |= condition
        branch.last_directive = PreprocessorDirective.ELIF

    def resolve_else(self) -> None:
        branch = self._current_chain_branch("else")

        branch.emit_now = not branch.any_branch_matched and branch.ancestors_active
        branch.any_branch_matched = True
        branch.last_directive = PreprocessorDirective.ELSE

    def resolve_endif(self) -> None:
        if not self:
            raise DirectiveSyntaxError(directive="endif", details="`endif` without `if`")
        self.pop()

    def ensure_terminated(self) -> None:
        """Validate that there is no unclosed blocks left (at end of an input)."""
        if self:
            raise UnterminatedConditionalError(unclosed_count=len(self))

    def _current_chain_branch(self, directive: str) -> ConditionalBranch:
        """Get innermost branch that `elif` / `else` continues, validating chain structure."""
        if not self:
            raise DirectiveSyntaxError(
                directive=directive,
                details=f"`{directive}` without `if`",
            )

        branch = self[-1]
        if branch.last_directive == PreprocessorDirective.ELSE:
            raise DirectiveSyntaxError(
                directive=directive,
                details=f"`{directive}` after `else`",
            )
        return branch


def _evaluate_condition(expression: str) -> bool:
    return evaluate_expression(expression.lstrip(" \t")) != 0
