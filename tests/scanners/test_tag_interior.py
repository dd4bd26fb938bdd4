"""Tests for the tag interior scanner."""

import pytest

from html2rsx.scanners.tag import scan_tag_interior
from html2rsx.spans import Category, Span


def _pairs(spans: list[Span]) -> list[tuple[Category, str]]:
    return [(s.category, s.text) for s in spans]


class TestTagName:
    """The first piece of an interior is the tag name."""

    def test_opening_tag_name(self) -> None:
        assert _pairs(scan_tag_interior("div")) == [(Category.TAG_NAME, "div")]

    def test_closing_tag_name_keeps_slash(self) -> None:
        assert _pairs(scan_tag_interior("/div")) == [(Category.TAG_NAME, "/div")]

    def test_self_closing_slash_split_from_name(self) -> None:
        assert _pairs(scan_tag_interior("br/")) == [
            (Category.TAG_NAME, "br"),
            (Category.TAG_DELIMITER, "/"),
        ]

    def test_leading_whitespace_preserved(self) -> None:
        assert _pairs(scan_tag_interior("  div")) == [
            (Category.PLAIN, "  "),
            (Category.TAG_NAME, "div"),
        ]

    def test_name_seen_makes_first_piece_an_attribute(self) -> None:
        assert _pairs(scan_tag_interior("checked", name_seen=True)) == [
            (Category.ATTRIBUTE_NAME, "checked"),
        ]


class TestAttributes:
    """Later pieces are attributes."""

    def test_attribute_with_unquoted_value(self) -> None:
        assert _pairs(scan_tag_interior("a href=x  download")) == [
            (Category.TAG_NAME, "a"),
            (Category.PLAIN, " "),
            (Category.ATTRIBUTE_NAME, "href"),
            (Category.PLAIN, "=x"),
            (Category.PLAIN, "  "),
            (Category.ATTRIBUTE_NAME, "download"),
        ]

    def test_value_after_first_equals_kept_whole(self) -> None:
        spans = scan_tag_interior("input data=a=b")
        assert _pairs(spans)[-2:] == [
            (Category.ATTRIBUTE_NAME, "data"),
            (Category.PLAIN, "=a=b"),
        ]

    def test_name_before_quote_keeps_equals_unwrapped(self) -> None:
        assert _pairs(scan_tag_interior("class=", name_seen=True)) == [
            (Category.ATTRIBUTE_NAME, "class"),
            (Category.PLAIN, "="),
        ]

    def test_bare_equals_piece(self) -> None:
        assert _pairs(scan_tag_interior("=x", name_seen=True)) == [(Category.PLAIN, "=x")]

    def test_lone_slash_is_delimiter(self) -> None:
        assert _pairs(scan_tag_interior(" /", name_seen=True)) == [
            (Category.PLAIN, " "),
            (Category.TAG_DELIMITER, "/"),
        ]


class TestOffsetsAndLosslessness:
    """Spans carry absolute offsets and cover the interior exactly."""

    def test_offsets_are_absolute(self) -> None:
        spans = scan_tag_interior("p id", offset=10)
        assert [s.offset for s in spans] == [10, 11, 12]

    def test_empty_interior(self) -> None:
        assert scan_tag_interior("") == []

    @pytest.mark.parametrize(
        "interior",
        ["div", "a  b=c\td", "/p ", "\n input  type=text  /", "x=y=z w"],
    )
    def test_join_reproduces_interior(self, interior: str) -> None:
        spans = scan_tag_interior(interior)
        assert "".join(s.text for s in spans) == interior
