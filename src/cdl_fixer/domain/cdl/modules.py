from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

from ...contracts.artifacts import Module, Port
from ...contracts.enums import PortDirection
from ...contracts.errors import InputUnavailableError
from .lines import split_lines

logger = logging.getLogger(__name__)

MODULE_INDENT = 0
PORT_INDENT = 4
DIRECTION_INDENT = 6
DIRECTION_KEY = "direction:"


class ParserState(Enum):
    top_level = "top_level"
    in_module = "in_module"
    in_port = "in_port"


@dataclass
class DescriptorParser:
    """Line-at-a-time parser for the indentation-structured module/port text.

    Example::

        inv:
            A:
              direction: in
            Y:
              direction: out
    """

    modules: Dict[str, Module] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    state: ParserState = ParserState.top_level
    current_module: Optional[Module] = None
    current_port: Optional[Port] = None

    def feed(self, lineno: int, raw_line: str) -> None:
        line = raw_line.rstrip("\r\n")
        body = line.lstrip()
        if not body or body.startswith("#"):
            return
        indent = len(line) - len(body)

        if indent == MODULE_INDENT:
            self._start_module(lineno, body)
        elif indent == PORT_INDENT:
            self._add_port(lineno, body)
        elif indent == DIRECTION_INDENT and DIRECTION_KEY in body:
            self._set_direction(body)
        else:
            logger.debug("descriptor line %d ignored: %r", lineno, line)

    def _start_module(self, lineno: int, body: str) -> None:
        name = body.split(":", 1)[0].strip()
        module = Module(name=name)
        if name in self.modules:
            self._warn(f"line {lineno}: duplicate module '{name}' ignored")
        else:
            self.modules[name] = module
        # Ports of a duplicate still attach to the throwaway module.
        self.current_module = module
        self.current_port = None
        self.state = ParserState.in_module

    def _add_port(self, lineno: int, body: str) -> None:
        name = body.split()[0].split(":", 1)[0]
        if self.state is ParserState.top_level or self.current_module is None:
            self._warn(f"line {lineno}: port '{name}' outside of any module")
            return
        if self.current_module.port(name) is not None:
            # First definition wins, including its direction.
            self._warn(f"line {lineno}: duplicate port '{name}' in module '{self.current_module.name}' ignored")
            self.current_port = None
            self.state = ParserState.in_module
            return
        port = Port(name=name)
        self.current_module.ports.append(port)
        self.current_port = port
        self.state = ParserState.in_port

    def _set_direction(self, body: str) -> None:
        if self.state is not ParserState.in_port or self.current_port is None:
            return
        value = body.split(DIRECTION_KEY, 1)[1]
        self.current_port.direction = PortDirection.classify(value)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def parse_module_descriptor(text: str) -> Dict[str, Module]:
    """Parse descriptor text into an ordered ``{module name: Module}`` mapping."""
    parser = DescriptorParser()
    for lineno, line in enumerate(split_lines(text), start=1):
        parser.feed(lineno, line)
    return parser.modules


def load_module_descriptor(path: Union[str, Path]) -> Dict[str, Module]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(path, str(exc)) from exc
    modules = parse_module_descriptor(text)
    logger.debug("loaded %d modules from %s", len(modules), path)
    return modules
