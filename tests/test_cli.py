"""Tests for the command line interface."""

import io
import logging
from pathlib import Path

import pytest

from pumlhelper.cli import build_parser, main
from pumlhelper.config import Config
from pumlhelper.main import find_diagrams, transform
from pumlhelper.models.direction import RotateDirection

UNSORTED = "@startuml\n[B] -> [C]\n[A] -> [B]\n@enduml\n"
SORTED = "@startuml\n[A] -> [B]\n[B] -> [C]\n@enduml\n"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "diagram.puml"
    path.write_bytes(text.encode("utf-8"))
    return path


# ###############
# Orchestration
# ###############


class TestFindDiagrams:
    def test_without_markers_the_whole_text(self) -> None:
        assert find_diagrams("A -> B\n") == [(0, 7)]

    def test_bodies_only(self) -> None:
        text = "x\n@startuml\nA -> B\n@enduml\n"
        ((start, end),) = find_diagrams(text)
        assert text[start:end] == "A -> B\n"

    def test_unterminated_diagram_is_skipped(self) -> None:
        assert find_diagrams("@startuml\nA -> B\n") == []


class TestTransform:
    def test_text_around_diagrams_is_kept(self) -> None:
        text = "# Doc\n" + UNSORTED + "between\n" + UNSORTED + "end"
        cfg = Config(input=None, output=None)
        assert transform(text, cfg) == "# Doc\n" + SORTED + "between\n" + SORTED + "end"

    def test_rotate(self) -> None:
        cfg = Config(input=None, output=None, rotate=RotateDirection.LEFT)
        assert transform("@startuml\nA -> B\n@enduml\n", cfg) == "@startuml\nB <-- A\n@enduml\n"

    def test_empty_diagram(self) -> None:
        cfg = Config(input=None, output=None)
        assert transform("@startuml\n@enduml\n", cfg) == "@startuml\n@enduml\n"

    def test_crlf_document(self) -> None:
        cfg = Config(input=None, output=None)
        text = UNSORTED.replace("\n", "\r\n")
        assert transform(text, cfg) == SORTED.replace("\n", "\r\n")


# ###############
# Command line
# ###############


class TestMain:
    def test_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        main([str(_write(tmp_path, UNSORTED))])
        assert capsys.readouterr().out == SORTED

    def test_output_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        out = tmp_path / "out" / "sorted.puml"
        main([str(_write(tmp_path, UNSORTED)), "-o", str(out)])
        assert out.read_text(encoding="utf-8") == SORTED
        assert capsys.readouterr().out == ""

    def test_in_place(self, tmp_path: Path) -> None:
        path = _write(tmp_path, UNSORTED.replace("\n", "\r\n"))
        main([str(path), "-i"])
        assert path.read_bytes() == SORTED.replace("\n", "\r\n").encode("utf-8")

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("[B] -> [C]\n[A] -> [B]\n"))
        main([])
        assert capsys.readouterr().out == "[A] -> [B]\n[B] -> [C]\n"

    def test_rotate(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        main([str(_write(tmp_path, "@startuml\nA -> B\n@enduml\n")), "--rotate", "swap"])
        assert capsys.readouterr().out == "@startuml\nB <- A\n@enduml\n"

    def test_error_exits_with_1(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = _write(tmp_path, "@startuml\nhello world\n@enduml\n")
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "Unknown diagram type" in caplog.text
        assert path.read_text(encoding="utf-8") == "@startuml\nhello world\n@enduml\n"


class TestParser:
    def test_defaults(self) -> None:
        ns = build_parser().parse_args([])
        assert ns.input is None
        assert ns.output is None
        assert not ns.in_place
        assert ns.rotate is None
        assert ns.encoding == "utf-8"
        assert ns.verbose == 0

    def test_verbose_count(self) -> None:
        assert build_parser().parse_args(["-vv"]).verbose == 2

    def test_in_place_needs_a_file(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-i"])
        assert exc_info.value.code == 2

    def test_output_and_in_place_exclude_each_other(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(tmp_path / "a.puml"), "-i", "-o", str(tmp_path / "b.puml")])

    def test_unknown_rotation(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--rotate", "up"])
