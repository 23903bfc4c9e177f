"""Run configuration for the CDL fixer."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

from .contracts.errors import ValidationError


@dataclass(slots=True)
class FixerConfig:
    """Which passes run, and where the optional module descriptor lives.

    Every pass is on by default; the CLI ``--no-*`` flags switch them off.
    """

    case_conversion: bool = True
    section_defaults: bool = True
    header: bool = True
    calc_geometry: bool = True
    module_descriptor: Path | None = None
    generator_name: str = "cdl-fixer"

    def validate(self) -> None:
        for field_name in ("case_conversion", "section_defaults", "header", "calc_geometry"):
            if not isinstance(getattr(self, field_name), bool):
                raise ValidationError(f"FixerConfig.{field_name} must be a boolean")
        if self.module_descriptor is not None and not isinstance(self.module_descriptor, Path):
            raise ValidationError("FixerConfig.module_descriptor must be a Path")
        if not isinstance(self.generator_name, str) or not self.generator_name.strip():
            raise ValidationError("FixerConfig.generator_name must be a non-empty string")
        if "\n" in self.generator_name:
            raise ValidationError("FixerConfig.generator_name must be a single line")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FixerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"unknown FixerConfig keys: {', '.join(unknown)}")
        payload = dict(data)
        descriptor = payload.get("module_descriptor")
        if descriptor is not None:
            payload["module_descriptor"] = Path(descriptor)
        config = cls(**payload)
        config.validate()
        return config

    def to_dict(self) -> MutableMapping[str, Any]:
        return {
            "case_conversion": self.case_conversion,
            "section_defaults": self.section_defaults,
            "header": self.header,
            "calc_geometry": self.calc_geometry,
            "module_descriptor": str(self.module_descriptor) if self.module_descriptor else None,
            "generator_name": self.generator_name,
        }
