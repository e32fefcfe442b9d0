# pumlhelper/models/direction.py
from __future__ import annotations
from enum import Enum, IntEnum


class ArrowDirection(Enum):
    """Endpoint the arrow head points to."""
    LEFT = "left"
    RIGHT = "right"


class Layout(Enum):
    HORIZONTAL = "horizontal"   # single body character: ->
    VERTICAL = "vertical"       # two or more: -->


class CombinedDirection(IntEnum):
    """Arrow direction and layout merged into one value, ordered clockwise."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


class RotateDirection(IntEnum):
    LEFT = -1
    RIGHT = 1
    SWAP = 2


def combined_of(direction: ArrowDirection, layout: Layout) -> CombinedDirection:
    if layout is Layout.HORIZONTAL:
        return CombinedDirection.LEFT if direction is ArrowDirection.LEFT else CombinedDirection.RIGHT
    return CombinedDirection.UP if direction is ArrowDirection.LEFT else CombinedDirection.DOWN


def direction_of(combined: CombinedDirection) -> ArrowDirection:
    if combined in (CombinedDirection.LEFT, CombinedDirection.UP):
        return ArrowDirection.LEFT
    return ArrowDirection.RIGHT


def layout_of(combined: CombinedDirection) -> Layout:
    if combined in (CombinedDirection.UP, CombinedDirection.DOWN):
        return Layout.VERTICAL
    return Layout.HORIZONTAL


def rotate(combined: CombinedDirection, by: RotateDirection) -> CombinedDirection:
    # addition modulo 4 over Right -> Down -> Left -> Up
    return CombinedDirection((int(combined) + int(by)) % 4)
