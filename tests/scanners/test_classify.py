"""Tests for RSX lexeme classification."""

import pytest

from html2rsx.config import ScanConfig, scan_config_context
from html2rsx.scanners.classify import classify
from html2rsx.spans import Category


class TestDefaultClassification:
    """Classification with the default keyword and attribute sets."""

    @pytest.mark.parametrize(
        "lexeme", ["rsx", "div", "span", "p", "h1", "h6", "a", "button", "section", "article"]
    )
    def test_element_names_are_keywords(self, lexeme: str) -> None:
        assert classify(lexeme) is Category.KEYWORD

    def test_surrounding_whitespace_ignored(self) -> None:
        assert classify("  div\n") is Category.KEYWORD

    @pytest.mark.parametrize("lexeme", ["onclick:", "class:", "x:"])
    def test_trailing_colon_is_attribute_marker(self, lexeme: str) -> None:
        assert classify(lexeme) is Category.ATTRIBUTE_MARKER

    @pytest.mark.parametrize("lexeme", ["class", "style"])
    def test_well_known_attributes(self, lexeme: str) -> None:
        assert classify(lexeme) is Category.ATTRIBUTE_MARKER

    @pytest.mark.parametrize("lexeme", ["0", "42", "3.14", ".5"])
    def test_numbers(self, lexeme: str) -> None:
        assert classify(lexeme) is Category.NUMERIC_LITERAL

    @pytest.mark.parametrize("lexeme", ["", "   ", "foo", "12px", "-1", "Div", "move", "|_|"])
    def test_everything_else_is_plain(self, lexeme: str) -> None:
        assert classify(lexeme) is Category.PLAIN

    def test_keyword_wins_over_trailing_colon_rule(self) -> None:
        config = ScanConfig(rsx_keywords=frozenset({"a:"}))
        assert classify("a:", config) is Category.KEYWORD


class TestConfiguredClassification:
    """Keyword and attribute sets come from the active ScanConfig."""

    def test_explicit_config(self) -> None:
        config = ScanConfig(rsx_keywords=frozenset({"Card"}), rsx_attributes=frozenset({"id"}))
        assert classify("Card", config) is Category.KEYWORD
        assert classify("div", config) is Category.PLAIN
        assert classify("id", config) is Category.ATTRIBUTE_MARKER
        assert classify("class", config) is Category.PLAIN

    def test_context_config(self) -> None:
        with scan_config_context(ScanConfig(rsx_keywords=frozenset({"Router"}))):
            assert classify("Router") is Category.KEYWORD
        assert classify("Router") is Category.PLAIN
