from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from ...contracts.artifacts import Module
from ...contracts.errors import ValidationError
from ...contracts.operators import Operator, OperatorResult
from ...contracts.provenance import ArtifactFingerprint
from ...domain.cdl import load_module_descriptor, merge_pininfo, parse_module_descriptor
from ._inputs import finish_provenance, line_store_input, start_provenance


def _modules_input(inputs: Mapping[str, Any]) -> Dict[str, Module]:
    modules = inputs.get("modules")
    if modules is not None:
        if not isinstance(modules, Mapping):
            raise ValidationError("modules must be a mapping of name -> Module")
        return dict(modules)
    descriptor_text = inputs.get("descriptor_text")
    if descriptor_text is not None:
        if not isinstance(descriptor_text, str):
            raise ValidationError("descriptor_text must be a string")
        return parse_module_descriptor(descriptor_text)
    descriptor_path = inputs.get("descriptor_path")
    if isinstance(descriptor_path, (str, Path)):
        return load_module_descriptor(descriptor_path)
    raise ValidationError("one of modules, descriptor_text or descriptor_path is required")


def _modules_payload(modules: Mapping[str, Module]) -> dict[str, object]:
    return {name: [port.pininfo_token() for port in module.ports] for name, module in modules.items()}


class PinInfoMergeOperator(Operator):
    """Insert or regenerate *.PININFO lines from a module/port descriptor."""

    name = "cdl_pininfo_merge"
    version = "0.1.0"

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        modules = _modules_input(inputs)

        provenance = start_provenance(self.name, self.version, store)
        provenance.inputs["modules"] = ArtifactFingerprint.of_json(_modules_payload(modules))

        stats = merge_pininfo(store, modules)

        provenance.lines_inserted = stats.inserted
        provenance.lines_rewritten = stats.replaced
        finish_provenance(provenance, store)
        warnings = [f"no module description for subckt {name}" for name in stats.unmatched]
        return OperatorResult(
            outputs={"line_store": store, "merge_stats": stats},
            provenance=provenance,
            warnings=warnings,
        )
