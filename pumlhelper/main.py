# pumlhelper/main.py
from __future__ import annotations
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Config
from .reformat import auto_format_text
from .renderer import TextWriter
from .rotate import rotate_text

logger = logging.getLogger(__name__)

# everything between the marker lines, markers excluded
_DIAGRAM = re.compile(r"(^[ \t]*@startuml[^\r\n]*(?:\r\n|\r|\n))(.*?)(^[ \t]*@enduml)", re.M | re.S)


def find_diagrams(text: str) -> List[Tuple[int, int]]:
    """(start, end) offsets of every diagram body; the whole text without markers."""
    spans = [(m.start(2), m.end(2)) for m in _DIAGRAM.finditer(text)]
    if not spans and "@startuml" not in text:
        return [(0, len(text))]
    return spans


def _convert(body: str, cfg: Config) -> str:
    if not body.strip():
        return body
    if cfg.rotate is not None:
        return rotate_text(body, cfg.rotate)
    return auto_format_text(body, cfg.rebuild)


def transform(text: str, cfg: Config) -> str:
    """Formats every diagram in `text`; the text around them stays as it is."""
    out = TextWriter(line_ending="")
    pos = 0
    for n, (start, end) in enumerate(find_diagrams(text)):
        logger.info("diagram %d at offset %d", n + 1, start)
        out.writeln(text[pos:start])
        out.writeln(_convert(text[start:end], cfg))
        pos = end
    out.writeln(text[pos:])
    return out.text()


def _read(cfg: Config) -> str:
    if cfg.input is None:
        return sys.stdin.read()
    with cfg.input.open("r", encoding=cfg.encoding, newline="") as f:
        return f.read()


def run(cfg: Config) -> Optional[Path]:
    text = _read(cfg)
    result = transform(text, cfg)
    target = cfg.target
    if target is None:
        sys.stdout.write(result)
        return None
    out = TextWriter(line_ending="")
    out.writeln(result)
    return out.save(target, cfg.encoding)
