from __future__ import annotations

from typing import List, Optional, Tuple
import logging
import math

from ...contracts.artifacts import GeometryResult
from .attributes import extract_value
from .si_units import format_si

logger = logging.getLogger(__name__)


def effective_width(w: float, fingers: Optional[float] = None) -> float:
    """Width of one finger; a missing or non-positive finger count means one finger."""
    if fingers is None or math.isnan(fingers) or fingers <= 0:
        return w
    return w / fingers


def solve_rectangle(area: float, pj: float) -> Optional[Tuple[float, float]]:
    """Recover (w, l) of a rectangle from its area and perimeter.

    Solves l + w = pj/2, l * w = area, preferring the root with l >= w.
    Returns None when there is no real, positive solution.
    """
    half = pj / 2
    delta = half * half - 4 * area
    if delta < 0:
        return None
    root = math.sqrt(delta)
    l1 = (half + root) / 2
    l2 = (half - root) / 2
    if l1 <= 0 and l2 <= 0:
        return None

    candidates: List[Tuple[float, float]] = []
    for length in (l1, l2):
        if length > 0:
            candidates.append((length, area / length))
    if not candidates:
        return None

    length, width = candidates[0]
    if length < width and len(candidates) > 1:
        length, width = candidates[1]
    return width, length


def recover_line(line: str) -> GeometryResult:
    """Append ``fw=`` and/or ``w= l=`` derived from the attributes of one line."""
    skipped: List[str] = []
    fw_value: Optional[float] = None
    w_value: Optional[float] = None
    l_value: Optional[float] = None

    w = extract_value(line, "w")
    l = extract_value(line, "l")
    if w is not None and l is not None:
        fw_value = effective_width(w, extract_value(line, "fingers"))
        line = f"{line} fw={format_si(fw_value)}"

    area = extract_value(line, "area")
    pj = extract_value(line, "pj")
    if area is not None and pj is not None:
        solved = solve_rectangle(area, pj)
        if solved is None:
            skipped.append(f"no rectangle with area={area:g} pj={pj:g}")
            logger.debug("geometry skipped, no real root: %s", line)
        else:
            w_value, l_value = solved
            line = f"{line} w={format_si(w_value)} l={format_si(l_value)}"

    return GeometryResult(line=line, fw=fw_value, w=w_value, l=l_value, skipped=tuple(skipped))
