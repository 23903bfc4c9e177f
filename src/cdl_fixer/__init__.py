from .config import FixerConfig
from .contracts.artifacts import Port, Module, GeometryResult, MergeStats
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
from .domain.cdl import LineStore, parse_si, format_si
from .operators import CdlFixOperator, fix_cdl_text

__version__ = "0.1.0"

__all__ = [
    "FixerConfig",
    # artifacts
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
    # operators
    "CdlFixOperator",
    "fix_cdl_text",
]
