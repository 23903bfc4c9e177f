from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple

from ...contracts.operators import Operator, OperatorResult
from ...domain.cdl import CDL_CASE_REPLACEMENTS, normalize_case
from ._inputs import finish_provenance, line_store_input, start_provenance


class CaseNormalizeOperator(Operator):
    """Lower-case the upper-case attribute keys (`` W=`` -> `` w=``)."""

    name = "cdl_case_normalize"
    version = "0.1.0"

    def __init__(self, replacements: Sequence[Tuple[str, str]] = CDL_CASE_REPLACEMENTS) -> None:
        self.replacements = tuple(replacements)

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        provenance = start_provenance(self.name, self.version, store)

        changed = normalize_case(store, self.replacements)

        provenance.lines_rewritten = changed
        finish_provenance(provenance, store)
        return OperatorResult(
            outputs={"line_store": store, "lines_changed": changed},
            provenance=provenance,
        )
