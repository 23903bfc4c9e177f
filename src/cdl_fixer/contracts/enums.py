from __future__ import annotations

from enum import Enum


class PortDirection(str, Enum):
    input = "in"
    output = "out"
    inout = "inout"

    @property
    def pin_code(self) -> str:
        """Single-letter code used on *.PININFO lines."""
        return _PIN_CODES[self]

    @classmethod
    def classify(cls, value: str) -> "PortDirection":
        """Map a free-form direction value onto in/out/inout."""
        text = value.strip().lower()
        if text == cls.inout.value:
            return cls.inout
        if text.startswith("i"):
            return cls.input
        if text.startswith("o"):
            return cls.output
        return cls.inout


_PIN_CODES = {
    PortDirection.input: "I",
    PortDirection.output: "O",
    PortDirection.inout: "B",
}


class PassName(str, Enum):
    header = "header"
    section_defaults = "section_defaults"
    case_conversion = "case_conversion"
    geometry = "geometry"
    pininfo = "pininfo"
