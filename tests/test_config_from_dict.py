"""Tests for ScanConfig.from_dict() method.

The from_dict() method lets settings come from JSON, TOML or query
parameters. Values of the wrong shape raise ConfigError.
"""

import pytest

from html2rsx.config import DEFAULT_THEME, ScanConfig
from html2rsx.errors import ConfigError
from html2rsx.spans import Category


class TestScanConfigFromDict:
    """Test ScanConfig.from_dict() factory method."""

    def test_from_dict_basic(self):
        """from_dict should create config with specified values."""
        config = ScanConfig.from_dict({"escape_html": True, "converter_timeout": 5})

        assert config.escape_html is True
        assert config.converter_timeout == 5
        # Defaults should still apply
        assert config.converter_command == ("dx", "translate", "--raw")

    def test_from_dict_ignores_unknown_keys(self):
        """from_dict should silently ignore unknown keys."""
        config = ScanConfig.from_dict({"escape_html": True, "unknown_key": "ignored"})

        assert config.escape_html is True

    def test_from_dict_empty(self):
        """from_dict with empty dict should return default config."""
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_aliases(self):
        config = ScanConfig.from_dict({"attribute_aliases": {"tabIndex": "tabindex"}})
        assert config.attribute_aliases == {"tabIndex": "tabindex"}

    def test_keyword_lists_become_frozensets(self):
        config = ScanConfig.from_dict({"rsx_keywords": ["ul", "li"], "rsx_attributes": ["id"]})
        assert config.rsx_keywords == frozenset({"ul", "li"})
        assert config.rsx_attributes == frozenset({"id"})

    def test_theme_merges_onto_defaults(self):
        config = ScanConfig.from_dict({"theme": {"keyword": "kw"}})
        assert config.css_class(Category.KEYWORD) == "kw"
        assert config.css_class(Category.BRACE) == DEFAULT_THEME[Category.BRACE]

    @pytest.mark.parametrize("key", [Category.TAG_NAME, "TAG_NAME", "tagName"])
    def test_theme_key_forms(self, key):
        config = ScanConfig.from_dict({"theme": {key: "tn"}})
        assert config.css_class(Category.TAG_NAME) == "tn"

    def test_command_string_is_split(self):
        config = ScanConfig.from_dict({"converter_command": "dx translate --raw"})
        assert config.converter_command == ("dx", "translate", "--raw")

    def test_command_list(self):
        config = ScanConfig.from_dict({"converter_command": ["/opt/dx", "translate"]})
        assert config.converter_command == ("/opt/dx", "translate")


class TestScanConfigFromDictErrors:
    """Invalid values raise ConfigError naming the key."""

    @pytest.mark.parametrize(
        ("config_dict", "key"),
        [
            ({"attribute_aliases": ["className"]}, "attribute_aliases"),
            ({"attribute_aliases": {"": "class"}}, "attribute_aliases"),
            ({"attribute_aliases": {"className": 1}}, "attribute_aliases"),
            ({"rsx_keywords": "div"}, "rsx_keywords"),
            ({"rsx_attributes": [1, 2]}, "rsx_attributes"),
            ({"rsx_keywords": 3}, "rsx_keywords"),
            ({"theme": "dark"}, "theme"),
            ({"theme": {"nope": "x"}}, "theme"),
            ({"theme": {"keyword": 7}}, "theme"),
            ({"converter_command": []}, "converter_command"),
            ({"converter_command": "   "}, "converter_command"),
            ({"converter_command": ["dx", None]}, "converter_command"),
        ],
    )
    def test_invalid_values(self, config_dict, key):
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig.from_dict(config_dict)
        assert exc_info.value.key == key
        assert str(exc_info.value).startswith(f"Invalid config '{key}': ")
