# pumlhelper/rotate.py
"""Turns single connections around while keeping their dependency.

    A -> B   --left-->   B <-- A
"""
from __future__ import annotations

from .models.direction import RotateDirection, rotate
from .models.line import Line
from .utils import detect_line_ending, split_lines


def rotate_line(line: str, direction: RotateDirection) -> str:
    parsed = Line.from_string(line)
    if parsed is None:
        return line
    rotated = parsed.with_combined_direction(rotate(parsed.combined_direction(), direction))
    return str(rotated)


def rotate_text(text: str, direction: RotateDirection) -> str:
    """Rotates every line of `text`; other lines are returned unchanged."""
    lf = detect_line_ending(text)
    return lf.join(rotate_line(s, direction) for s in split_lines(text))
