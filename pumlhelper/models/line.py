# pumlhelper/models/line.py
from __future__ import annotations
import re
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

from ..utils import reverse_label
from .arrow import Arrow
from .attachable import Attachable
from .direction import (
    ArrowDirection,
    CombinedDirection,
    combined_of,
    direction_of,
    layout_of,
)

# first letters of CombinedDirection in enum order: -up-> / -d-> / ...
DIRECTIONS = "rdlu"

_WS = re.compile(r"\s*")
_QUOTED = re.compile(r'"[^"]+"')
_WRAPPED = re.compile(r"\[[^\[\]\"]+\]|\([^()\"]+\)")
_BARE = re.compile(r'[^-~="<>\\/\s]+')
_LEFT_MULT = re.compile(r'\s+("[^"]+")')
_RIGHT_MULT = re.compile(r'("[^"]+")\s+')
_ARROW_END = re.compile(r"[^A-Za-np-z_\s]")
_NON_SPACE = re.compile(r"\S+")
_TAIL = re.compile(r"\s*(?::.*)?")

# lead, A, "1", ->, "2", B, : label
_Match = Tuple[str, str, str, str, str, str, str]


def _components(s: str, pos: int) -> Iterator[Tuple[str, int]]:
    m = _QUOTED.match(s, pos)
    if m:
        yield m.group(), m.end()
        return
    m = _WRAPPED.match(s, pos)
    if m:
        # [my component] or (my interface)
        yield m.group(), m.end()
    m = _BARE.match(s, pos)
    if not m:
        return
    # longest first; a name never ends with a dot (A..>B)
    for end in range(m.end(), pos, -1):
        if s[end - 1] != ".":
            yield s[pos:end], end


def _multiplicity(regex: "re.Pattern[str]", s: str, pos: int) -> Iterator[Tuple[str, int]]:
    m = regex.match(s, pos)
    if m:
        yield m.group(1), m.end()
    yield "", pos


def _arrows(s: str, pos: int) -> Iterator[Tuple[str, int]]:
    m = _NON_SPACE.match(s, pos)
    if not m:
        return
    # shortest first, so in `A->B: hi` the arrow stops before the glued `B`
    for end in range(pos + 1, m.end() + 1):
        if _ARROW_END.match(s, end - 1) and Arrow.from_string(s[pos:end]) is not None:
            yield s[pos:end], end


def _scan(s: str) -> Optional[_Match]:
    lead = _WS.match(s).group()
    for left, p1 in _components(s, len(lead)):
        for mult_left, p2 in _multiplicity(_LEFT_MULT, s, p1):
            p3 = _WS.match(s, p2).end()
            for arrow, p4 in _arrows(s, p3):
                p5 = _WS.match(s, p4).end()
                for mult_right, p6 in _multiplicity(_RIGHT_MULT, s, p5):
                    for right, p7 in _components(s, p6):
                        if _TAIL.fullmatch(s, p7):
                            return lead, left, mult_left, arrow, mult_right, right, s[p7:]
    return None


@dataclass(eq=False)
class Line(Attachable):
    """One connection statement: `A "1" --> "*" B : label`."""
    components: List[str]
    arrow: Arrow
    multiplicities: List[str]
    sides: List[str]
    attached: List[str] = field(default_factory=list)

    @classmethod
    def from_string(cls, line: str) -> Optional["Line"]:
        m = _scan(line)
        if m is None:
            return None
        lead, left, mult_left, arrow_text, mult_right, right, tail = m
        result = cls(
            components=[left, right],
            arrow=Arrow.from_string(arrow_text),
            multiplicities=[mult_left, mult_right],
            sides=[lead, tail],
        )
        tag = result.arrow.tag
        if tag and tag[0] in DIRECTIONS:
            # explicit direction like -up-> replaces the visual one
            result.arrow.tag = ""
            result = result.with_combined_direction(CombinedDirection(DIRECTIONS.index(tag[0])))
        return result

    def __str__(self) -> str:
        parts = [
            self.components[0],
            self.multiplicities[0],
            str(self.arrow),
            self.multiplicities[1],
            self.components[1],
        ]
        text = ""
        for p in parts:
            if not p:
                continue
            # incoming and outgoing messages keep the arrow glued: [-> A, A ->]
            glued = not text or text == "[" or p == "]"
            text += p if glued else " " + p
        return self.sides[0] + text + self.sides[1] + self.attached_to_string()

    def combined_direction(self) -> CombinedDirection:
        return combined_of(self.arrow.direction, self.arrow.layout)

    def with_combined_direction(self, combined: CombinedDirection) -> "Line":
        """Returns the line pointing to `combined`.

        Changing the arrow direction swaps the endpoints as well, so the logical
        dependency (which endpoint is the source) stays the same.
        """
        line = self
        if direction_of(combined) is not self.arrow.direction:
            line = self.reverse()
        return replace(
            line,
            components=list(line.components),
            arrow=replace(line.arrow, layout=layout_of(combined)),
            multiplicities=list(line.multiplicities),
            sides=list(line.sides),
            attached=list(line.attached),
        )

    def with_default_direction(self) -> "Line":
        # inheritance points up, everything else to the right
        if self.arrow.is_inheritance():
            return self.with_combined_direction(CombinedDirection.UP)
        return self.with_combined_direction(CombinedDirection.RIGHT)

    def reverse(self) -> "Line":
        return Line(
            components=[self.components[1], self.components[0]],
            arrow=self.arrow.reverse(),
            multiplicities=[self.multiplicities[1], self.multiplicities[0]],
            # the label might contain an arrow head as well: `: have 4 >`
            sides=[self.sides[0], reverse_label(self.sides[1])],
            attached=list(self.attached),
        )

    def deps(self) -> Tuple[str, str]:
        """(source, target) of the dependency, independent of the written order."""
        if self.arrow.direction is ArrowDirection.RIGHT:
            return self.components[0], self.components[1]
        return self.components[1], self.components[0]

    def component_names(self) -> List[str]:
        # without the brackets of [Component]
        return [c[1:-1] if c.startswith("[") and c.endswith("]") else c for c in self.components]

    def has(self, name: str) -> bool:
        return name in self.components
