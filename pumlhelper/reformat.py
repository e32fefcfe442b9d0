# pumlhelper/reformat.py
from __future__ import annotations
import logging
import re

from .diagramtype import DiagramType, get_type
from .errors import UnknownDiagramType
from .handler_registry import resolve
from .handlers import component, sequence  # noqa: F401  (registers the sorters)
from .models.component import Component
from .renderer import TextWriter
from .utils import detect_line_ending, split_lines

logger = logging.getLogger(__name__)

_TRAILING = re.compile(r"\s*\Z")


def _trailing(text: str, lf: str) -> str:
    # short endings are normalized, longer ones (blank lines, indentation) kept
    ws = _TRAILING.search(text).group()
    if not ws:
        return ""
    if len(ws) <= 2:
        return lf
    return ws


def auto_format_text(text: str, rebuild: bool = False) -> str:
    """Sorts the content of one diagram (the text between @startuml and @enduml).

    Raises UnknownDiagramType if the text does not look like any diagram and
    UnsupportedDiagramType if no sorter exists for the detected type.
    """
    lf = detect_line_ending(text)
    lines = split_lines(text)
    diagram_type = get_type(lines)
    logger.debug("diagram type: %s", diagram_type.value)
    if diagram_type is DiagramType.UNKNOWN:
        raise UnknownDiagramType()
    Handler = resolve(diagram_type)
    logger.debug("handler: %s", Handler.__name__)

    tree = Handler(Component.from_string(lines)).auto_format(rebuild)

    out = TextWriter(line_ending=lf, trailing=_trailing(text, lf))
    out.write_block(str(tree).rstrip())
    return out.text()
