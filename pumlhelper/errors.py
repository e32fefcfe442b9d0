# pumlhelper/errors.py
from __future__ import annotations

from .diagramtype import DiagramType


class ReformatError(RuntimeError):
    """Base class of all errors surfaced to the caller of a format command."""


class UnknownDiagramType(ReformatError):
    def __init__(self) -> None:
        super().__init__("Unknown diagram type: no keyword, declaration or arrow found.")


class UnsupportedDiagramType(ReformatError):
    def __init__(self, diagram_type: DiagramType) -> None:
        self.diagram_type = diagram_type
        super().__init__(f"Diagram type {diagram_type.value!r} is not supported yet.")


class InternalInvariantViolation(ReformatError):
    """Inconsistent diagram data, e.g. a package no connection refers to."""
