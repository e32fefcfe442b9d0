"""Tests for arrow parsing."""

import pytest

from pumlhelper.models.arrow import Arrow
from pumlhelper.models.direction import ArrowDirection, Layout


class TestFromString:
    @pytest.mark.parametrize(
        "text, direction, layout",
        [
            ("->", ArrowDirection.RIGHT, Layout.HORIZONTAL),
            ("-->", ArrowDirection.RIGHT, Layout.VERTICAL),
            ("<-", ArrowDirection.LEFT, Layout.HORIZONTAL),
            ("<|--", ArrowDirection.LEFT, Layout.VERTICAL),
            ("..>", ArrowDirection.RIGHT, Layout.VERTICAL),
            ("-", ArrowDirection.RIGHT, Layout.HORIZONTAL),
            ("==>", ArrowDirection.RIGHT, Layout.VERTICAL),
            ("~~", ArrowDirection.RIGHT, Layout.VERTICAL),
        ],
    )
    def test_direction_and_layout(self, text: str, direction: ArrowDirection, layout: Layout) -> None:
        arrow = Arrow.from_string(text)
        assert arrow is not None
        assert arrow.direction is direction
        assert arrow.layout is layout

    @pytest.mark.parametrize("text", ["->", "-->", "<|--", "*-", "o..", "....>", "-[#red]->", "<->"])
    def test_serialization_is_unchanged(self, text: str) -> None:
        assert str(Arrow.from_string(text)) == text

    def test_no_body_is_no_arrow(self) -> None:
        assert Arrow.from_string(">") is None
        assert Arrow.from_string("abc") is None

    def test_tag_is_extracted(self) -> None:
        arrow = Arrow.from_string("-up->")
        assert arrow.tag == "up"
        assert arrow.right == ">"

    def test_elongated_arrow_keeps_its_size(self) -> None:
        arrow = Arrow.from_string("---->")
        assert arrow.size_vert == 4
        arrow.layout = Layout.HORIZONTAL
        assert str(arrow) == "->"
        arrow.layout = Layout.VERTICAL
        assert str(arrow) == "---->"


class TestReverse:
    def test_heads_are_mirrored(self) -> None:
        arrow = Arrow.from_string("<|--").reverse()
        assert str(arrow) == "--|>"
        assert arrow.direction is ArrowDirection.RIGHT

    def test_composition(self) -> None:
        assert str(Arrow.from_string("*-").reverse()) == "-*"


class TestHeads:
    def test_inheritance(self) -> None:
        assert Arrow.from_string("<|--").is_inheritance()
        assert Arrow.from_string("..|>").is_inheritance()
        assert not Arrow.from_string("-->").is_inheritance()

    def test_composition(self) -> None:
        assert Arrow.from_string("*--").is_composition()
        assert Arrow.from_string("--o").is_composition()
        assert not Arrow.from_string("<|--").is_composition()
