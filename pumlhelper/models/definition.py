# pumlhelper/models/definition.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ..diagramtype import (
    REGEX_CLASS,
    REGEX_COMPONENT,
    REGEX_INTERFACE,
    REGEX_SEQUENCE,
    is_component_declaration,
)
from .attachable import Attachable


def _shorten(s: str) -> str:
    # "name" -> name, [name] -> name
    if len(s) >= 2 and s[0] in "\"[" and s[-1] in "\"]":
        return s[1:-1]
    return s


@dataclass(eq=False)
class Definition(Attachable):
    """A declaration: `component [A] as CA`, `interface IB`, `participant P`."""
    type: str
    name: str
    alias: Optional[str] = None
    print_name: Optional[str] = None     # name as written, with quotes or brackets
    source: Optional[str] = None         # parsed line, kept verbatim
    attached: List[str] = field(default_factory=list)

    @classmethod
    def from_string(cls, line: str) -> Optional["Definition"]:
        m = REGEX_INTERFACE.match(line)
        if m:
            kind = "interface"
        elif is_component_declaration(line):
            m = REGEX_COMPONENT.match(line)
            kind = "component"
        else:
            m = REGEX_CLASS.match(line) or REGEX_SEQUENCE.match(line)
            if not m:
                return None
            kind = m.group(1)
        return cls(
            type=kind,
            name=_shorten(m.group(2)),
            alias=m.group(3),
            print_name=m.group(2),
            source=line,
        )

    @property
    def ref(self) -> str:
        """How connections refer to this declaration."""
        return self.alias or self.print_name or self.name

    def _printable_name(self) -> str:
        if self.print_name:
            return self.print_name
        if self.is_component():
            return f"[{self.name}]"
        if any(c.isspace() for c in self.name):
            return f'"{self.name}"'
        return self.name

    def __str__(self) -> str:
        if self.source is not None:
            text = self.source
        else:
            text = f"{self.type} {self._printable_name()}"
            if self.alias:
                text += f" as {self.alias}"
        return text + self.attached_to_string()

    def is_component(self) -> bool:
        return self.type == "component"

    def declares(self, name: str) -> bool:
        return name in (self.name, self.alias, self.print_name)
