# pumlhelper/diagramtype.py
from __future__ import annotations
import re
from enum import Enum
from typing import Dict, Iterable


class DiagramType(Enum):
    CLASS_COMPONENT = "class/component"  # class, component and object diagrams are not distinguished
    SEQUENCE = "sequence"
    USE_CASE = "use case"
    ACTIVITY = "activity"
    STATE = "state"
    TIMING = "timing"
    UNKNOWN = "unknown"


_NAME = r'(?:"[^"]+")'

REGEX_INTERFACE = re.compile(r'^\s*(\(\)|interface)\s+(' + _NAME + r'|[^"\s]+)(?:\s+as\s+(\S+))?\s*$')
REGEX_COMPONENT = re.compile(r'^\s*(component\s+)?((?:\[[^*\]]+\])|' + _NAME + r'|[^[*\]\s"]+)(?:\s+as\s+(\S+))?\s*$')
REGEX_CLASS = re.compile(
    r"^\s*(class|enum|abstract|abstract class|annotation)\s+([^[\]\s]+)(?:\s+as\s+(\S+))?\s*$"
)
REGEX_SEQUENCE = re.compile(
    r"^\s*(actor|participant|boundary|control|entity|database|collections|queue)\s+("
    + _NAME
    + r"|[^[\]\s]+)(?:\s+as\s+(\S+))?\s*$"
)
REGEX_USE_CASE = re.compile(r"(?:^|\s)(?::[^:]+:|\([^:()*]+\))(?:$|\s)")
REGEX_ACTIVITY = re.compile(r"(?:^|\s)\(\*\)(?:$|\s)|^\s*:.*;\s*$")
REGEX_STATE = re.compile(r"(?:^|\s)\[\*\](?:$|\s)")
_REGEX_COMP_USE = re.compile(r"(?:^|\s)\[[^*\]]+\](?:$|\s)")

_TOKEN = re.compile(r"^\s*([a-z]+)")

# actor also starts use case diagrams; a sequence diagram is assumed
_KEYWORDS: Dict[str, DiagramType] = {
    "class": DiagramType.CLASS_COMPONENT,
    "interface": DiagramType.CLASS_COMPONENT,
    "component": DiagramType.CLASS_COMPONENT,
    "annotation": DiagramType.CLASS_COMPONENT,
    "abstract": DiagramType.CLASS_COMPONENT,
    "enum": DiagramType.CLASS_COMPONENT,
    "actor": DiagramType.SEQUENCE,
    "participant": DiagramType.SEQUENCE,
    "boundary": DiagramType.SEQUENCE,
    "control": DiagramType.SEQUENCE,
    "entity": DiagramType.SEQUENCE,
    "database": DiagramType.SEQUENCE,
    "collections": DiagramType.SEQUENCE,
    "queue": DiagramType.SEQUENCE,
    "return": DiagramType.SEQUENCE,
    "activate": DiagramType.SEQUENCE,
    "deactivate": DiagramType.SEQUENCE,
    "if": DiagramType.ACTIVITY,
    "else": DiagramType.ACTIVITY,
    "endif": DiagramType.ACTIVITY,
    "state": DiagramType.STATE,
    "clock": DiagramType.TIMING,
    "robust": DiagramType.TIMING,
    "concise": DiagramType.TIMING,
}

_CLASS_ARROWS = ("<|-", "*-", "o-", "-|>", "-*", "-o")
_PLAIN_ARROWS = ("->", "<-", " ++ ", " ** ")


def is_component_declaration(line: str) -> bool:
    # a bare word is no declaration: `component A` or `[A]`
    m = REGEX_COMPONENT.match(line)
    return bool(m) and bool(m.group(1) or m.group(2).startswith("["))


def _type_by_keyword(line: str) -> DiagramType:
    m = _TOKEN.match(line)
    if m:
        return _KEYWORDS.get(m.group(1), DiagramType.UNKNOWN)
    return DiagramType.UNKNOWN


def _type_by_structure(line: str) -> DiagramType:
    if line.strip() == "...":
        return DiagramType.UNKNOWN
    if (
        REGEX_INTERFACE.match(line)
        or is_component_declaration(line)
        or REGEX_CLASS.match(line)
        or _REGEX_COMP_USE.search(line)
    ):
        return DiagramType.CLASS_COMPONENT
    if REGEX_STATE.search(line):
        return DiagramType.STATE
    if REGEX_ACTIVITY.search(line):
        return DiagramType.ACTIVITY
    if REGEX_USE_CASE.search(line):
        return DiagramType.USE_CASE
    return DiagramType.UNKNOWN


def get_type(lines: Iterable[str]) -> DiagramType:
    """Guesses the diagram family from its lines.

    Tries keywords first (first matching line wins), then structural patterns
    like `[Component]` or `:use case:`, then typical arrows.
    """
    lines = list(lines)
    for check in (_type_by_keyword, _type_by_structure):
        for line in lines:
            t = check(line)
            if t is not DiagramType.UNKNOWN:
                return t
    for line in lines:
        if any(a in line for a in _CLASS_ARROWS):
            return DiagramType.CLASS_COMPONENT
    for line in lines:
        if any(a in line for a in _PLAIN_ARROWS):
            return DiagramType.SEQUENCE
    return DiagramType.UNKNOWN
