# pumlhelper/models/component.py
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from .definition import Definition
from .line import Line

Content = Union[Line, Definition, str]

# package "name" <<stereotype>> #color {
REGEX_TITLE = re.compile(
    r"^\s*(package|namespace|node|folder|frame|cloud|database|rectangle|class|component|interface|enum|annotation)"
    r"\s+(\"[^\"]*\"|[^{\s]*)\s*(<<[^>]*>>)?\s*(#\S+)?\s*([^{]*?)\s*\{.*$"
)

# bodies of these blocks are members, not connections
CLASS_TYPES = ("abstract", "abstract class", "annotation", "class", "entity", "enum", "interface")

DEFAULT_TAB = "  "


def _prepare(lines: Sequence[str]) -> List[str]:
    # a lone `{` belongs to the header on the previous line
    arr = [s.rstrip() for s in lines]
    for i in range(1, len(arr)):
        if arr[i].strip().startswith("{") and arr[i - 1]:
            arr[i - 1] = arr[i - 1] + " " + arr[i].strip()
            arr[i] = ""
    return [s for s in arr if s.strip()]


@dataclass(eq=False)
class Component:
    """A block of diagram content, e.g. a package, with its nested blocks.

    The root of a diagram has no `type`.
    """
    content: List[Content] = field(default_factory=list)
    children: List["Component"] = field(default_factory=list)
    type: Optional[str] = None
    name: Optional[str] = None
    print_name: Optional[str] = None
    stereotype: Optional[str] = None
    color: Optional[str] = None
    suffix: Optional[str] = None            # anything else between name and `{`
    footer: List[str] = field(default_factory=list)

    @classmethod
    def from_string(cls, text: Union[str, Sequence[str]]) -> "Component":
        lines = _prepare(text.split("\n") if isinstance(text, str) else text)
        root, _ = cls._parse(lines, 0, None)
        if not root.content and not root.footer and len(root.children) == 1:
            return root.children[0]
        return root

    @classmethod
    def _parse(
        cls, lines: List[str], i: int, title: Optional["re.Match[str]"]
    ) -> Tuple["Component", int]:
        comp = cls()
        if title is not None:
            comp.type = title.group(1)
            comp.print_name = title.group(2) or None
            if comp.print_name:
                comp.name = comp.print_name.strip('"')
            comp.stereotype = title.group(3)
            comp.color = title.group(4)
            comp.suffix = title.group(5) or None
        parse_lines = comp.type not in CLASS_TYPES
        prev: Optional[Union[Line, Definition]] = None
        while i < len(lines):
            s = lines[i]
            i += 1
            if title is not None and s.strip() == "}":
                break
            definition = Definition.from_string(s)
            if definition is not None:
                comp.content.append(definition)
                prev = definition
                continue
            m = REGEX_TITLE.match(s)
            if m:
                child, i = cls._parse(lines, i, m)
                comp.children.append(child)
                prev = None
                continue
            line = Line.from_string(s) if parse_lines else None
            if line is not None:
                comp.content.append(line)
                prev = line
            elif prev is not None:
                prev.attach(s)
            else:
                comp.content.append(s)
        if prev is not None:
            comp.footer = prev.move_attached()
        return comp, i

    # ---------- queries ----------
    def lines(self) -> Iterator[Line]:
        for c in self.content:
            if isinstance(c, Line):
                yield c

    def definitions(self) -> Iterator[Definition]:
        for c in self.content:
            if isinstance(c, Definition):
                yield c

    def non_lines(self) -> Iterator[Content]:
        for c in self.content:
            if not isinstance(c, Line):
                yield c

    def for_all(self, fun: Callable[["Component"], None]) -> None:
        fun(self)
        for c in self.children:
            c.for_all(fun)

    def any_of(self, check: Callable[["Component"], bool]) -> bool:
        return check(self) or any(c.any_of(check) for c in self.children)

    def contains_name(self, name: str) -> bool:
        return self.any_of(
            lambda c: c.name == name or c.has_definition(name) or c.has_namespace(name)
        )

    def has_definition(self, name: str) -> bool:
        return any(d.name == name or d.alias == name for d in self.definitions())

    def has_namespace(self, name: str) -> bool:
        return self.is_namespace() and bool(self.name) and name.startswith(self.name)

    def is_component(self) -> bool:
        return self.type == "component"

    def is_namespace(self) -> bool:
        return self.type == "namespace"

    # ---------- serialization ----------
    def header(self) -> str:
        parts = [self.type, self.print_name, self.stereotype, self.color, self.suffix]
        return " ".join(p for p in parts if p) + " {"

    def __str__(self) -> str:
        return "\n".join(self._to_lines(""))

    def _to_lines(self, tab: str) -> List[str]:
        if self.type:
            inner = tab + DEFAULT_TAB
            out = [tab + self.header()]
            out.extend(self._body(inner, strip=True))
            out.append(tab + "}")
            return out
        return self._body(tab, strip=False)

    def _body(self, tab: str, strip: bool) -> List[str]:
        def fmt(c: Content) -> str:
            s = str(c)
            return tab + s.lstrip() if strip else s

        idx = next((n for n, c in enumerate(self.content) if isinstance(c, Line)), len(self.content))
        out = [fmt(c) for c in self.content[:idx]]
        for child in self.children:
            out.extend(child._to_lines(tab))
        out.extend(fmt(c) for c in self.content[idx:])
        out.extend(fmt(s) for s in self.footer)
        return out
