"""
Stable, explicit API surface for cdl_fixer.

Use this module instead of relying on __init__.py re-exports to avoid drift.
"""

from __future__ import annotations

from .config import FixerConfig
from .contracts import Port, Module, GeometryResult, MergeStats
from .contracts.enums import PortDirection, PassName
from .contracts.errors import (
    CdlFixerError,
    ContractError,
    ValidationError,
    OperatorError,
    InputUnavailableError,
)
from .contracts.operators import Operator, OperatorResult
from .contracts.provenance import ArtifactFingerprint, Provenance
from .domain.cdl import (
    LineStore,
    parse_si,
    format_si,
    extract_attribute,
    extract_value,
    recover_line,
    solve_rectangle,
    effective_width,
    ensure_sections,
    normalize_case,
    parse_module_descriptor,
    load_module_descriptor,
    merge_pininfo,
    build_pininfo_line,
)
from .io import read_netlist, write_netlist
from .operators import (
    SectionDefaultsOperator,
    HeaderBannerOperator,
    CaseNormalizeOperator,
    GeometryRecoveryOperator,
    PinInfoMergeOperator,
    CdlFixOperator,
    fix_cdl_text,
)

__all__ = [
    # config
    "FixerConfig",
    # contracts - artifacts
    "Port",
    "Module",
    "GeometryResult",
    "MergeStats",
    # enums
    "PortDirection",
    "PassName",
    # errors
    "CdlFixerError",
    "ContractError",
    "ValidationError",
    "OperatorError",
    "InputUnavailableError",
    # protocols
    "Operator",
    "OperatorResult",
    "ArtifactFingerprint",
    "Provenance",
    # domain
    "LineStore",
    "parse_si",
    "format_si",
    "extract_attribute",
    "extract_value",
    "recover_line",
    "solve_rectangle",
    "effective_width",
    "ensure_sections",
    "normalize_case",
    "parse_module_descriptor",
    "load_module_descriptor",
    "merge_pininfo",
    "build_pininfo_line",
    # io
    "read_netlist",
    "write_netlist",
    # operators
    "SectionDefaultsOperator",
    "HeaderBannerOperator",
    "CaseNormalizeOperator",
    "GeometryRecoveryOperator",
    "PinInfoMergeOperator",
    "CdlFixOperator",
    "fix_cdl_text",
]
