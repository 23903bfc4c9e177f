from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional
import hashlib
import json
import time


@dataclass(frozen=True)
class ArtifactFingerprint:
    """sha256 of an artifact as it would be written out."""
    sha256: str

    @classmethod
    def of_text(cls, text: str) -> "ArtifactFingerprint":
        return cls(sha256=hashlib.sha256(text.encode("utf-8", errors="ignore")).hexdigest())

    @classmethod
    def of_lines(cls, lines: Iterable[str]) -> "ArtifactFingerprint":
        return cls.of_text("".join(f"{line}\n" for line in lines))

    @classmethod
    def of_json(cls, obj: Any) -> "ArtifactFingerprint":
        """Hash plain JSON data (config dicts, port tables) with sorted keys."""
        return cls.of_text(json.dumps(obj, sort_keys=True, separators=(",", ":")))

    def short(self) -> str:
        return self.sha256[:12]


@dataclass
class Provenance:
    """What one pass did to the line store."""
    operator: str
    version: str = "0.0"
    inputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    outputs: Dict[str, ArtifactFingerprint] = field(default_factory=dict)
    lines_in: int = 0
    lines_out: int = 0
    lines_inserted: int = 0
    lines_rewritten: int = 0
    elapsed_s: Optional[float] = None
    _started: float = field(default_factory=time.perf_counter, repr=False)

    def finish(self, lines_out: int) -> None:
        self.lines_out = lines_out
        self.elapsed_s = time.perf_counter() - self._started

    def summary(self) -> str:
        return (
            f"{self.operator}: {self.lines_in} -> {self.lines_out} lines, "
            f"{self.lines_inserted} inserted, {self.lines_rewritten} rewritten"
        )
