"""RSX lexeme classifier.

Pure logic: maps one separator-delimited lexeme to a Category. The keyword
and attribute sets come from the active ScanConfig.
"""

from __future__ import annotations

from html2rsx.config import ScanConfig, get_scan_config
from html2rsx.spans import Category

_NUMERIC_CHARS = frozenset("0123456789.")


def classify(lexeme: str, config: ScanConfig | None = None) -> Category:
    """Classify an RSX lexeme.

    Rules, first match wins:
    - blank: PLAIN
    - known element name: KEYWORD
    - ends with ``:``: ATTRIBUTE_MARKER
    - well-known attribute identifier: ATTRIBUTE_MARKER
    - only ASCII digits and ``.``: NUMERIC_LITERAL
    - anything else: PLAIN

    Args:
        lexeme: Raw lexeme text (surrounding whitespace is ignored)
        config: Configuration to use (defaults to the active ScanConfig)

    Returns:
        Category of the lexeme

    Example:
        >>> classify("div"), classify("onclick:"), classify("1.5")
        (<Category.KEYWORD: 'keyword'>, <Category.ATTRIBUTE_MARKER: 'attributeMarker'>, <Category.NUMERIC_LITERAL: 'numericLiteral'>)
    """
    clean = lexeme.strip()
    if not clean:
        return Category.PLAIN

    if config is None:
        config = get_scan_config()

    if clean in config.rsx_keywords:
        return Category.KEYWORD
    if clean.endswith(":"):
        return Category.ATTRIBUTE_MARKER
    if clean in config.rsx_attributes:
        return Category.ATTRIBUTE_MARKER
    if all(char in _NUMERIC_CHARS for char in clean):
        return Category.NUMERIC_LITERAL
    return Category.PLAIN
