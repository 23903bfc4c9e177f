from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .enums import PortDirection


@dataclass
class Port:
    name: str
    direction: PortDirection = PortDirection.inout

    def pininfo_token(self) -> str:
        return f"{self.name}:{self.direction.pin_code}"


@dataclass
class Module:
    """A named block from the module/port descriptor, ports in file order."""
    name: str
    ports: List[Port] = field(default_factory=list)

    def port(self, name: str) -> Optional[Port]:
        for port in self.ports:
            if port.name == name:
                return port
        return None


@dataclass(frozen=True)
class GeometryResult:
    """Outcome of recovering w/l/fw for one line."""
    line: str
    fw: Optional[float] = None
    w: Optional[float] = None
    l: Optional[float] = None
    skipped: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return self.fw is not None or self.w is not None


@dataclass(frozen=True)
class MergeStats:
    inserted: int = 0
    replaced: int = 0
    unmatched: Tuple[str, ...] = ()
