from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class CdlFixerError(Exception):
    """Base error for cdl_fixer."""


class ContractError(CdlFixerError):
    """Raised when a contract (artifact/operator/config) is violated."""


class ValidationError(ContractError):
    """Raised when an input artifact fails validation."""


class OperatorError(CdlFixerError):
    """Raised when an operator fails to execute correctly."""


class InputUnavailableError(OperatorError):
    """Raised when a netlist or module descriptor cannot be opened."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None) -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
