from __future__ import annotations

from typing import Any, Mapping

from ...contracts.errors import ValidationError
from ...contracts.provenance import ArtifactFingerprint, Provenance
from ...domain.cdl import LineStore


def line_store_input(inputs: Mapping[str, Any]) -> LineStore:
    """Fetch a private copy of the working lines from ``line_store`` or ``netlist_text``."""
    store = inputs.get("line_store")
    if store is not None:
        if not isinstance(store, LineStore):
            raise ValidationError("line_store must be a LineStore")
        return LineStore(store.lines())
    netlist_text = inputs.get("netlist_text")
    if not isinstance(netlist_text, str):
        raise ValidationError("netlist_text must be provided as a string")
    return LineStore.from_text(netlist_text)


def start_provenance(name: str, version: str, store: LineStore) -> Provenance:
    provenance = Provenance(operator=name, version=version, lines_in=len(store))
    provenance.inputs["line_store"] = ArtifactFingerprint.of_lines(store)
    return provenance


def finish_provenance(provenance: Provenance, store: LineStore) -> None:
    provenance.outputs["line_store"] = ArtifactFingerprint.of_lines(store)
    provenance.finish(lines_out=len(store))
