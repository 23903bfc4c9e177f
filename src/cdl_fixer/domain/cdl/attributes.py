from __future__ import annotations

from functools import lru_cache
from typing import Optional, Pattern
import math
import re

from .si_units import parse_si


# Keys whose value may be a bare integer (no unit letters).
UNITLESS_KEYS = frozenset({"fingers"})


@lru_cache(maxsize=None)
def attribute_pattern(key: str) -> Pattern[str]:
    """Regex for ``key=<numeral><unit>`` not glued to a longer key (``fw=`` is not ``w=``).

    An exponent (``1.5e-6``) stands in for the unit letters.
    """
    exponent = "[eE][+-]?[0-9]+"
    if key in UNITLESS_KEYS:
        value = rf"[0-9]+\.?[0-9]*(?:{exponent})?[a-zA-Z]*"
    else:
        value = rf"[0-9]+\.?[0-9]*(?:{exponent}[a-zA-Z]*|[a-zA-Z]+)"
    return re.compile(rf"(?<![A-Za-z0-9_]){re.escape(key)}=({value})")


def extract_attribute(line: str, key: str) -> Optional[str]:
    """Return the value text of the first ``key=`` on the line, or None."""
    match = attribute_pattern(key).search(line)
    if match is None:
        return None
    return match.group(1)


def extract_value(line: str, key: str) -> Optional[float]:
    """Like extract_attribute, but converted through the SI codec.

    Malformed numerals count as absent.
    """
    text = extract_attribute(line, key)
    if text is None:
        return None
    value = parse_si(text)
    if math.isnan(value):
        return None
    return value
