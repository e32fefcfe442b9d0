# pumlhelper/models/arrow.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

from ..utils import reverse, reverse_head
from .direction import ArrowDirection, Layout

# any [...] or l(eft), r(ight), u(p), d(own)
_TAG = re.compile(r"[lrud]\S*|\[\S+\]")

# checked in this order: `-.->` is a dashed arrow
BODY_CHARS = ("-", ".", "=", "~")


def _body_char(arrow: str) -> Optional[str]:
    for c in BODY_CHARS:
        if c in arrow:
            return c
    return None


def _tag_index(segments: List[str]) -> int:
    for i, s in enumerate(segments):
        if _TAG.search(s):
            return i
    return -1


def _rev_head(head: str) -> str:
    return reverse(reverse_head(head))


@dataclass
class Arrow:
    left: str
    line: str
    size_vert: int
    tag: str
    right: str
    direction: ArrowDirection
    layout: Layout

    @classmethod
    def from_string(cls, arrow: str) -> Optional["Arrow"]:
        line = _body_char(arrow)
        if line is None:
            return None
        segments = arrow.split(line)
        tag = ""
        idx = _tag_index(segments)
        if idx != -1:
            tag, segments[idx] = segments[idx], ""
        left = segments[0]
        # right is the default, also for undirected arrows
        direction = ArrowDirection.LEFT if "<" in left else ArrowDirection.RIGHT
        layout = Layout.HORIZONTAL if len(segments) <= 2 else Layout.VERTICAL
        return cls(
            left=left,
            line=line,
            size_vert=max(2, len(segments) - 1),
            tag=tag,
            right=segments[-1],
            direction=direction,
            layout=layout,
        )

    def __str__(self) -> str:
        mid = self.line + self.tag
        if self.layout is Layout.VERTICAL:
            mid += self.line * (self.size_vert - 1)
        return self.left + mid + self.right

    def reverse(self) -> "Arrow":
        return Arrow(
            left=_rev_head(self.right),
            line=self.line,
            size_vert=self.size_vert,
            tag=self.tag,
            right=_rev_head(self.left),
            direction=ArrowDirection.LEFT if self.direction is ArrowDirection.RIGHT else ArrowDirection.RIGHT,
            layout=self.layout,
        )

    def is_inheritance(self) -> bool:
        return "<|" in self.left or "|>" in self.right

    def is_composition(self) -> bool:
        return any(c in head for head in (self.left, self.right) for c in "*o")
