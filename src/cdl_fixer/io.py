"""Read-all / write-all plumbing for netlists on disk or standard streams."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO, Union
import sys

from .contracts.errors import InputUnavailableError

PathLike = Union[str, Path]


def read_netlist(path: Optional[PathLike] = None, stream: Optional[TextIO] = None) -> str:
    """Read the whole netlist from ``path``, or from ``stream`` (stdin by default)."""
    if path is None:
        source = stream or sys.stdin
        try:
            return source.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailableError(getattr(source, "name", "<stdin>"), str(exc)) from exc
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(path, str(exc)) from exc


def write_netlist(text: str, path: Optional[PathLike] = None, stream: Optional[TextIO] = None) -> None:
    """Write the finished netlist to ``path``, or to ``stream`` (stdout by default)."""
    if path is None:
        out = stream or sys.stdout
        out.write(text)
        out.flush()
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise InputUnavailableError(path, str(exc)) from exc
