from __future__ import annotations
from pathlib import Path
from typing import List


class TextWriter:
    """
    Pure string builder. Only `save()` touches the filesystem.
    Lines are collected without line endings; `text()` joins them with the
    ending of the source document.
    """
    def __init__(self, line_ending: str = "\n", trailing: str = ""):
        self._buf: List[str] = []
        self._lf = line_ending
        self._trailing = trailing

    def writeln(self, line: str = "") -> None:
        self._buf.append(line)

    def write_block(self, text: str) -> None:
        # a formatted block may span several lines
        self._buf.extend(text.split("\n"))

    def text(self) -> str:
        return self._lf.join(self._buf) + self._trailing

    def save(self, path: Path, encoding: str = "utf-8") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps \r\n and \r as they are
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(self.text())
        return path
