from __future__ import annotations

from typing import Sequence, Tuple

from .lines import LineStore


CDL_CASE_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    (" W=", " w="),
    (" L=", " l="),
    (" AREA=", " area="),
    (" PJ=", " pj="),
    (" M=", " m="),
    (" FW=", " fw="),
    (" C=", " c="),
    (" R=", " r="),
    (" FINGERS=", " fingers="),
)


def lowercase_keys(line: str, replacements: Sequence[Tuple[str, str]] = CDL_CASE_REPLACEMENTS) -> str:
    """Literal substring replacement of upper-case attribute keys."""
    for upper, lower in replacements:
        line = line.replace(upper, lower)
    return line


def normalize_case(store: LineStore, replacements: Sequence[Tuple[str, str]] = CDL_CASE_REPLACEMENTS) -> int:
    """Rewrite every line in place; returns how many lines changed."""
    changed = 0
    for idx, line in enumerate(store):
        fixed = lowercase_keys(line, replacements)
        if fixed != line:
            store.replace(idx, fixed)
            changed += 1
    return changed
