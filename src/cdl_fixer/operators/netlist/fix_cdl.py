from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from ...config import FixerConfig
from ...contracts.artifacts import Module
from ...contracts.enums import PassName
from ...contracts.errors import ValidationError
from ...contracts.operators import Operator, OperatorResult
from ...contracts.provenance import ArtifactFingerprint
from ...domain.cdl import load_module_descriptor
from ._inputs import finish_provenance, line_store_input, start_provenance
from .case_convert import CaseNormalizeOperator
from .geometry import GeometryRecoveryOperator
from .pininfo import PinInfoMergeOperator
from .sections import HeaderBannerOperator, SectionDefaultsOperator

logger = logging.getLogger(__name__)


class CdlFixOperator(Operator):
    """Run the full fix-up pipeline over one netlist.

    Order: netlist banner, section defaults, generator banner, case
    conversion, geometry recovery, then the *.PININFO merge when module
    descriptions are available. Disabled passes are skipped.
    """

    name = "cdl_fix"
    version = "0.1.0"

    def __init__(self, config: Optional[FixerConfig] = None) -> None:
        self.config = config or FixerConfig()
        self.config.validate()

    def _passes(self, modules: Optional[Mapping[str, Module]]) -> List[Tuple[PassName, Operator, Dict[str, Any]]]:
        cfg = self.config
        passes: List[Tuple[PassName, Operator, Dict[str, Any]]] = []
        if cfg.header:
            passes.append((PassName.header, HeaderBannerOperator("netlist"), {}))
        if cfg.section_defaults:
            passes.append((PassName.section_defaults, SectionDefaultsOperator(), {}))
        if cfg.header:
            passes.append((PassName.header, HeaderBannerOperator("generator", cfg.generator_name), {}))
        if cfg.case_conversion:
            passes.append((PassName.case_conversion, CaseNormalizeOperator(), {}))
        if cfg.calc_geometry:
            passes.append((PassName.geometry, GeometryRecoveryOperator(), {}))
        if modules is not None:
            passes.append((PassName.pininfo, PinInfoMergeOperator(), {"modules": modules}))
        return passes

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        store = line_store_input(inputs)
        netlist_text = inputs.get("netlist_text")

        modules = inputs.get("modules")
        if modules is not None and not isinstance(modules, Mapping):
            raise ValidationError("modules must be a mapping of name -> Module")
        if modules is None and self.config.module_descriptor is not None:
            modules = load_module_descriptor(self.config.module_descriptor)

        provenance = start_provenance(self.name, self.version, store)
        if isinstance(netlist_text, str):
            provenance.inputs["netlist_text"] = ArtifactFingerprint.of_text(netlist_text)
        provenance.inputs["config"] = ArtifactFingerprint.of_json(self.config.to_dict())

        warnings: List[str] = []
        pass_results: List[OperatorResult] = []
        for pass_name, op, extra in self._passes(modules):
            result = op.run({"line_store": store, **extra}, ctx)
            store = result.outputs["line_store"]
            pass_results.append(result)
            warnings.extend(result.warnings)
            provenance.lines_inserted += result.provenance.lines_inserted
            provenance.lines_rewritten += result.provenance.lines_rewritten
            logger.debug("%s pass: %s", pass_name.value, result.summary)

        fixed_text = store.to_text()
        provenance.outputs["fixed_text"] = ArtifactFingerprint.of_text(fixed_text)
        finish_provenance(provenance, store)

        return OperatorResult(
            outputs={
                "fixed_text": fixed_text,
                "line_store": store,
                "passes": [r.provenance.operator for r in pass_results],
                "pass_results": pass_results,
            },
            provenance=provenance,
            warnings=warnings,
        )


def fix_cdl_text(netlist_text: str, config: Optional[FixerConfig] = None, modules: Optional[Mapping[str, Module]] = None) -> str:
    """Convenience wrapper: netlist text in, fixed netlist text out."""
    inputs: Dict[str, Any] = {"netlist_text": netlist_text}
    if modules is not None:
        inputs["modules"] = modules
    return CdlFixOperator(config).run(inputs, ctx=None).outputs["fixed_text"]
