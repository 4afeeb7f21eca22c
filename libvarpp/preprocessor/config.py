from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Literal, TypeAlias

UNKNOWN_DIRECTIVE_POLICY: TypeAlias = Literal["fail", "append"]

DEFAULT_DIRECTIVE_PREFIX = "#"


@dataclass(frozen=True)
class PreprocessorConfig:
    """Configuration of an preprocessor, static for whole preprocessor instance."""

    # Lines that starts with that prefix are treated as directives
    directive_prefix: str = DEFAULT_DIRECTIVE_PREFIX

    # `fail` aborts on unknown directive, `append` treats such line as an regular text line
    unknown_directive_policy: UNKNOWN_DIRECTIVE_POLICY = "fail"

    def __post_init__(self) -> None:
        if not self.directive_prefix or any(c.isspace() for c in self.directive_prefix):
            msg = f"Directive prefix must be non-empty and contain no whitespace, got {self.directive_prefix!r}"
            raise ValueError(msg)
        if self.unknown_directive_policy not in ("fail", "append"):
            msg = f"Unknown directive policy must be `fail` or `append`, got {self.unknown_directive_policy!r}"
            raise ValueError(msg)


def merge_into_preprocessor_config(
    config: PreprocessorConfig,
    from_object: object,
    *,
    prefix: str = "",
) -> PreprocessorConfig:
    """Construct new config by overriding fields with non-None `{prefix}_{field}` attributes of an object."""
    overrides: dict[str, object] = {}
    for field in dataclasses.fields(PreprocessorConfig):
        from_name = prefix + "_" + field.name
        if hasattr(from_object, from_name):
            arg_value = getattr(from_object, from_name)
            if arg_value is not None:
                overrides[field.name] = arg_value
    return dataclasses.replace(config, **overrides)
