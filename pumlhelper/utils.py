# pumlhelper/utils.py
from __future__ import annotations
import re
from typing import List


def reverse(s: str) -> str:
    """`abcd` -> `dcba`"""
    return s[::-1]


def reverse_head(head: str) -> str:
    """Turns the arrow heads in `head` around: `->` gets `-<`, `<|` gets `>|`.

    Only one kind of head is flipped: if any `>` is present all of them become `<`,
    otherwise all `<` become `>`.
    """
    if ">" in head:
        return head.replace(">", "<")
    return head.replace("<", ">")


# a reading direction marker stands alone: `: have 4 >`, `: < owns`
_LABEL_HEAD = re.compile(r"(?<=[\s:])[<>](?=\s|$)")
_SWAP = {"<": ">", ">": "<"}


def reverse_label(label: str) -> str:
    """Turns the direction markers of a connection label around.

    `List<String>` and other text is left alone, so reversing twice is a no-op.
    """
    return _LABEL_HEAD.sub(lambda m: _SWAP[m.group()], label)


def detect_line_ending(text: str) -> str:
    crlf = text.count("\r\n")
    lf = text.count("\n") - crlf
    if crlf == 0 and lf == 0:
        return "\r" if "\r" in text else "\n"
    return "\r\n" if crlf > lf else "\n"


def split_lines(text: str) -> List[str]:
    """Splits on any line ending style (`\\r\\n`, `\\n` or a lone `\\r`)."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
