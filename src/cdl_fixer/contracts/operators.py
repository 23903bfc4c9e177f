from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol, runtime_checkable

from .provenance import Provenance


@dataclass
class OperatorResult:
    """Outputs of one pass plus its line accounting and non-fatal warnings."""
    outputs: Dict[str, Any] = field(default_factory=dict)
    provenance: Provenance = field(default_factory=lambda: Provenance(operator="unknown"))
    warnings: List[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return self.provenance.summary()


@runtime_checkable
class Operator(Protocol):
    """One netlist pass: line store in, rewritten line store out."""
    name: str
    version: str

    def run(self, inputs: Mapping[str, Any], ctx: Any) -> OperatorResult:
        ...
