from __future__ import annotations

from typing import List, Mapping, Optional
import logging

from ...contracts.artifacts import MergeStats, Module
from .lines import LineStore

logger = logging.getLogger(__name__)

SUBCKT_TOKEN = ".SUBCKT"
PININFO_TOKEN = "*.PININFO"


def subckt_name(line: str) -> Optional[str]:
    """Module name of a ``.SUBCKT`` declaration, or None for any other line."""
    tokens = line.split()
    if len(tokens) < 2 or tokens[0] != SUBCKT_TOKEN:
        return None
    return tokens[1]


def build_pininfo_line(module: Module) -> str:
    return " ".join([PININFO_TOKEN] + [port.pininfo_token() for port in module.ports])


def merge_pininfo(store: LineStore, modules: Mapping[str, Module]) -> MergeStats:
    """Insert or regenerate the *.PININFO line after each known .SUBCKT line."""
    inserted = 0
    replaced = 0
    unmatched: List[str] = []

    idx = 0
    while idx < len(store):
        name = subckt_name(store[idx])
        if name is None:
            idx += 1
            continue
        module = modules.get(name)
        if module is None:
            logger.debug("no descriptor for subckt %s", name)
            unmatched.append(name)
            idx += 1
            continue
        if not module.ports:
            idx += 1
            continue

        pininfo = build_pininfo_line(module)
        next_idx = idx + 1
        if next_idx < len(store) and store[next_idx].startswith(PININFO_TOKEN):
            store.replace(next_idx, pininfo)
            replaced += 1
        else:
            store.insert_after(idx, pininfo)
            inserted += 1
        idx = next_idx + 1

    return MergeStats(inserted=inserted, replaced=replaced, unmatched=tuple(unmatched))
