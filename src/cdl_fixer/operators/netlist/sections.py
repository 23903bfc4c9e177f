from __future__ import annotations

from typing import Any, Mapping, Sequence

from ...contracts.errors import ValidationError
from ...contracts.operators import Operator, OperatorResult
from ...domain.cdl import (
    CDL_SECTION_DEFAULTS,
    SectionDefault,
    ensure_sections,
    generator_banner,
    netlist_banner,
    prepend_banner,
)
from ._inputs import finish_provenance, line_store_input, start_provenance


class SectionDefaultsOperator(Operator):
    """Prepend default declaration lines for missing CDL sections."""

    name = "cdl_section_defaults"
    version = "0.1.0"

    def __init__(self, defaults: Sequence[SectionDefault] = CDL_SECTION_DEFAULTS) -> None:
        self.defaults = tuple(defaults)

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        provenance = start_provenance(self.name, self.version, store)

        inserted = ensure_sections(store, self.defaults)

        provenance.lines_inserted = len(inserted)
        finish_provenance(provenance, store)
        return OperatorResult(
            outputs={"line_store": store, "inserted": tuple(inserted)},
            provenance=provenance,
        )


class HeaderBannerOperator(Operator):
    """Prepend either the netlist banner or the generator banner."""

    name = "cdl_header_banner"
    version = "0.1.0"

    def __init__(self, banner: str = "netlist", generator_name: str = "cdl-fixer") -> None:
        if banner not in ("netlist", "generator"):
            raise ValidationError(f"unknown banner '{banner}'")
        self.banner = banner
        self.generator_name = generator_name

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        provenance = start_provenance(self.name, self.version, store)

        if self.banner == "netlist":
            lines = netlist_banner()
            marker = lines[2]
        else:
            lines = generator_banner(self.generator_name)
            marker = lines[1]
        added = prepend_banner(store, lines, marker)

        provenance.lines_inserted = len(lines) if added else 0
        finish_provenance(provenance, store)
        return OperatorResult(
            outputs={"line_store": store, "added": added},
            provenance=provenance,
        )
