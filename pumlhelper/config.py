from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models.direction import RotateDirection


@dataclass
class Config:
    # one field per command line flag
    input: Optional[Path]                # FILE, None reads stdin
    output: Optional[Path]               # -o / --output, None writes stdout
    in_place: bool = False               # -i / --in-place
    rebuild: bool = False                # --rebuild
    rotate: Optional[RotateDirection] = None   # --rotate, replaces sorting
    encoding: str = "utf-8"              # --encoding
    verbose: int = 0                     # -v / -vv

    @property
    def target(self) -> Optional[Path]:
        return self.input if self.in_place else self.output
