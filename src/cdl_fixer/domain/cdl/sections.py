from __future__ import annotations

from dataclasses import dataclass
from typing import List, Pattern, Sequence, Tuple
import re

from .lines import LineStore


RULE_LINE = "*" * 72


@dataclass(frozen=True)
class SectionDefault:
    pattern: Pattern[str]
    default_line: str

    @classmethod
    def for_marker(cls, marker: str, default_line: str | None = None) -> "SectionDefault":
        return cls(pattern=re.compile("^" + re.escape(marker)), default_line=default_line or marker)


# Processed in this order; each missing one is prepended, so output order is reversed.
CDL_SECTION_DEFAULTS: Tuple[SectionDefault, ...] = (
    SectionDefault.for_marker(".PARAM"),
    SectionDefault.for_marker("*.MEGA"),
    SectionDefault.for_marker("*.EQUATION"),
    SectionDefault.for_marker("*.DIOAREA"),
    SectionDefault.for_marker("*.DIOPERI"),
    SectionDefault.for_marker("*.CAPVAL"),
    SectionDefault.for_marker("*.RESVAL"),
    SectionDefault.for_marker("*.BIPOLAR"),
)


def has_match(store: LineStore, pattern: Pattern[str]) -> bool:
    return any(pattern.match(line) for line in store)


def ensure_sections(
    store: LineStore,
    defaults: Sequence[SectionDefault] = CDL_SECTION_DEFAULTS,
) -> List[str]:
    """Prepend the default line for every section marker missing from the store.

    Returns the inserted default lines in processing order.
    """
    inserted: List[str] = []
    for section in defaults:
        if not has_match(store, section.pattern):
            store.prepend(section.default_line)
            inserted.append(section.default_line)
    return inserted


def netlist_banner() -> List[str]:
    return ["", RULE_LINE, "* CDL netlist", RULE_LINE]


def generator_banner(generator_name: str) -> List[str]:
    return [RULE_LINE, f"* Generated by {generator_name}", "", "* CDL parameter", RULE_LINE]


def prepend_banner(store: LineStore, banner: Sequence[str], marker: str) -> bool:
    """Prepend a banner unless its marker line is already in the store."""
    if marker in store:
        return False
    store.prepend_block(banner)
    return True
