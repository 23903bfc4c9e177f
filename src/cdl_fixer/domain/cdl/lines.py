from __future__ import annotations

from typing import Iterable, Iterator, List, overload

from ...contracts.errors import ValidationError


def _checked(line: str) -> str:
    if not isinstance(line, str):
        raise ValidationError(f"line must be a string, got {type(line).__name__}")
    if "\n" in line:
        raise ValidationError(f"line must not contain a newline: {line!r}")
    return line


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping the ``\\r`` of CRLF endings."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class LineStore:
    """Ordered, mutable netlist lines; insertion order is output order."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = [_checked(line) for line in lines]

    @classmethod
    def from_text(cls, text: str) -> "LineStore":
        """Split text into lines, dropping empty ones."""
        return cls(line for line in split_lines(text) if line)

    def to_text(self) -> str:
        """Join lines with a trailing newline after the last one."""
        return "".join(f"{line}\n" for line in self._lines)

    def prepend(self, line: str) -> None:
        self._lines.insert(0, _checked(line))

    def prepend_block(self, lines: Iterable[str]) -> None:
        """Prepend several lines, keeping their relative order."""
        block = [_checked(line) for line in lines]
        self._lines[0:0] = block

    def replace(self, index: int, line: str) -> None:
        self._lines[index] = _checked(line)

    def insert_after(self, index: int, line: str) -> None:
        if not -len(self._lines) <= index < len(self._lines):
            raise IndexError(f"line index {index} out of range")
        if index < 0:
            index += len(self._lines)
        self._lines.insert(index + 1, _checked(line))

    def lines(self) -> List[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> List[str]: ...

    def __getitem__(self, index):
        return self._lines[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LineStore):
            return self._lines == other._lines
        return NotImplemented

    def __repr__(self) -> str:
        return f"LineStore({len(self._lines)} lines)"
