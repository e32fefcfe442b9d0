from __future__ import annotations
from typing import Callable, Dict

from .diagramtype import DiagramType
from .errors import UnsupportedDiagramType

# Handler protocol (duck-typed): class with
#   __init__(component), auto_format(rebuild) -> Component

_REGISTRY: Dict[DiagramType, type] = {}


def register(diagram_type: DiagramType) -> Callable[[type], type]:
    def deco(cls: type) -> type:
        _REGISTRY[diagram_type] = cls
        return cls
    return deco


def resolve(diagram_type: DiagramType) -> type:
    try:
        return _REGISTRY[diagram_type]
    except KeyError:
        raise UnsupportedDiagramType(diagram_type) from None


def registered_types() -> Dict[DiagramType, type]:
    return dict(_REGISTRY)
