from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .errors import ReformatError
from .main import run
from .models.direction import RotateDirection

logger = logging.getLogger(__name__)

_ROTATIONS = {d.name.lower(): d for d in RotateDirection}
_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pumlhelper",
        description="Sorts and rotates the connections of PlantUML diagrams.",
    )
    p.add_argument("input", nargs="?", type=Path, default=None, metavar="FILE",
                   help="PlantUML source. If omitted, standard input is read.")
    out = p.add_mutually_exclusive_group()
    out.add_argument("-o", "--output", type=Path, default=None,
                     help="Write the result to OUTPUT instead of standard output.")
    out.add_argument("-i", "--in-place", action="store_true",
                     help="Rewrite FILE.")
    p.add_argument("--rebuild", action="store_true",
                   help="Reset every connection to its default direction before sorting.")
    p.add_argument("--rotate", choices=sorted(_ROTATIONS), default=None,
                   help="Rotate every connection instead of sorting the diagram.")
    p.add_argument("--encoding", type=str, default="utf-8",
                   help="Encoding of FILE and OUTPUT (default: utf-8).")
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="More output (-v info, -vv debug).")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    ns = parser.parse_args(argv)
    if ns.in_place and ns.input is None:
        parser.error("--in-place requires FILE")
    logging.basicConfig(
        level=_LEVELS[min(ns.verbose, len(_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(
        input=ns.input,
        output=ns.output,
        in_place=ns.in_place,
        rebuild=ns.rebuild,
        rotate=_ROTATIONS[ns.rotate] if ns.rotate else None,
        encoding=ns.encoding,
        verbose=ns.verbose,
    )
    try:
        path = run(cfg)
    except ReformatError as e:
        logger.error("%s", e)
        sys.exit(1)
    if path is not None:
        logger.info("written %s", path)
