from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .macro import Macro

WORD_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def try_expand_macros_in_line(line: str, macros: Mapping[str, Macro]) -> str | None:
    """Try to expand every known macro word within line in single left-to-right pass.

    Substituted text is not re-scanned, so macros expanding into other macro names are kept as-is.
    :returns line: Rewritten line or None if nothing was substituted (original line must be used).
    """
    if not macros:
        return None

    chunks: list[str] = []
    consumed_until = 0

    for word in WORD_PATTERN.finditer(line):
        if not (macro := macros.get(word.group())):
            continue
        # Copy everything between previous substitution and this word verbatim
        chunks.append(line[consumed_until : word.start()])
        chunks.append(macro.expansion)
        consumed_until = word.end()

    if not chunks:
        return None

    chunks.append(line[consumed_until:])
    return "".join(chunks)
