from __future__ import annotations

from typing import Tuple
import math
import re


# Ascending by magnitude; parse looks suffixes up here.
SI_PREFIXES: Tuple[Tuple[str, float], ...] = (
    ("y", 1e-24),
    ("z", 1e-21),
    ("a", 1e-18),
    ("f", 1e-15),
    ("p", 1e-12),
    ("n", 1e-9),
    ("u", 1e-6),
    ("m", 1e-3),
    ("c", 1e-2),
    ("d", 1e-1),
    ("da", 1e1),
    ("h", 1e2),
    ("k", 1e3),
    ("M", 1e6),
    ("G", 1e9),
    ("T", 1e12),
    ("P", 1e15),
    ("E", 1e18),
    ("Z", 1e21),
    ("Y", 1e24),
)

_MULTIPLIERS = dict(SI_PREFIXES)
_DIVISORS = tuple(reversed(SI_PREFIXES))

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(\S*)")


def parse_si(text: str) -> float:
    """Parse ``"2.5u"``-style text into a float.

    The unit is whatever non-blank text follows the numeral. Known prefixes
    scale the value, anything else is ignored and the bare numeral returned.
    Returns NaN when the text does not start with a number.
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return math.nan
    number_str, unit = match.groups()
    value = float(number_str)
    multiplier = _MULTIPLIERS.get(unit)
    if multiplier is None:
        return value
    return value * multiplier


def format_si(value: float) -> str:
    """Render a float with the largest prefix whose divisor fits under |value|."""
    magnitude = abs(value)
    for unit, divisor in _DIVISORS:
        if magnitude >= divisor:
            return f"{value / divisor:g}{unit}"
    return f"{value:g}"


