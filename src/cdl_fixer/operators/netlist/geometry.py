from __future__ import annotations

from typing import Any, Mapping

from ...contracts.operators import Operator, OperatorResult
from ...domain.cdl import recover_line
from ._inputs import finish_provenance, line_store_input, start_provenance


class GeometryRecoveryOperator(Operator):
    """Append fw= and area/pj-derived w=/l= to every device line."""

    name = "cdl_geometry_recovery"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        provenance = start_provenance(self.name, self.version, store)

        warnings: list[str] = []
        augmented = 0
        for idx, line in enumerate(store):
            result = recover_line(line)
            if result.changed:
                store.replace(idx, result.line)
                augmented += 1
            warnings.extend(f"line {idx + 1}: {reason}" for reason in result.skipped)

        provenance.lines_rewritten = augmented
        finish_provenance(provenance, store)
        return OperatorResult(
            outputs={"line_store": store, "lines_augmented": augmented},
            provenance=provenance,
            warnings=warnings,
        )
