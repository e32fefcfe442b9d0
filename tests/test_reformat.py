"""Tests for the auto format entry point."""

import pytest

from pumlhelper.diagramtype import DiagramType
from pumlhelper.errors import ReformatError, UnknownDiagramType, UnsupportedDiagramType
from pumlhelper.reformat import auto_format_text


class TestAutoFormatText:
    def test_component_diagram(self) -> None:
        assert auto_format_text("[B] -> [C]\n[A] -> [B]\n") == "[A] -> [B]\n[B] -> [C]\n"

    def test_sorted_diagram_is_unchanged(self) -> None:
        text = "[C] -> [B]\n[A] -> [B]\n"
        assert auto_format_text(text) == text

    def test_sequence_diagram(self) -> None:
        assert auto_format_text("Bob -> Carol: x\nAlice -> Bob: y\n") == (
            "participant Alice\nparticipant Bob\nparticipant Carol\n"
            "Bob -> Carol: x\nAlice -> Bob: y\n"
        )

    def test_notes_stay_attached(self) -> None:
        text = "[B] -> [C]\nnote right: about C\n[A] -> [B]\n"
        assert auto_format_text(text) == "[A] -> [B]\n[B] -> [C]\nnote right: about C\n"

    def test_rebuild(self) -> None:
        assert auto_format_text("B --|> A\nC --> D\n", rebuild=True) == "A <|-- B\nC -> D\n"

    @pytest.mark.parametrize(
        "text",
        [
            "[B] -> [C]\n[A] -> [B]\n",
            "package P {\n  [A] -> [B]\n}\n",
            "Bob -> Carol: x\nAlice -> Bob: y\n",
            "class A\nclass B {\n  +x: int\n}\nB --|> A\n",
        ],
    )
    def test_idempotence(self, text: str) -> None:
        once = auto_format_text(text)
        assert auto_format_text(once) == once


class TestLineEndings:
    def test_crlf_is_kept(self) -> None:
        text = "[B] -> [C]\r\n[A] -> [B]\r\n"
        assert auto_format_text(text) == "[A] -> [B]\r\n[B] -> [C]\r\n"

    def test_lone_cr(self) -> None:
        assert auto_format_text("[B] -> [C]\r[A] -> [B]") == "[A] -> [B]\r[B] -> [C]"

    def test_no_trailing_newline(self) -> None:
        assert auto_format_text("[B] -> [C]\n[A] -> [B]") == "[A] -> [B]\n[B] -> [C]"

    def test_short_ending_is_normalized(self) -> None:
        assert auto_format_text("[B] -> [C]\n[A] -> [B]  ") == "[A] -> [B]\n[B] -> [C]\n"

    def test_long_ending_is_kept(self) -> None:
        text = "[B] -> [C]\n[A] -> [B]\n\n\n  "
        assert auto_format_text(text) == "[A] -> [B]\n[B] -> [C]\n\n\n  "


class TestErrors:
    def test_unknown(self) -> None:
        with pytest.raises(UnknownDiagramType):
            auto_format_text("hello world")

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedDiagramType) as exc_info:
            auto_format_text("[*] --> Idle\nIdle --> [*]")
        assert exc_info.value.diagram_type is DiagramType.STATE
        assert "state" in str(exc_info.value)

    def test_all_are_reformat_errors(self) -> None:
        with pytest.raises(ReformatError):
            auto_format_text(":User: --> (Login)")


class TestPackagesWithConnections:
    def test_top_level_connection_is_kept(self) -> None:
        text = "package P {\n  [A]\n}\n[C] -> [A]\n"
        assert auto_format_text(text) == text

    def test_connections_of_packages_can_be_formatted_again(self) -> None:
        once = auto_format_text("package P {\n  [A] -> [B]\n}\npackage Q {\n  [C] -> [A]\n}\n")
        assert once.endswith("}\n[C] -> [A]\n[A] -> [B]\n")
        assert auto_format_text(once) == once
