"""Scan states for the html2rsx scanners.

Each scanner's lexical context is a tagged union: exactly one state object is
active at any position, and data that only makes sense in one context (the
quote character of an attribute value, whether a tag name was already seen)
lives on that state alone. Combinations such as "in a comment and in an
attribute value" cannot be expressed.

All states are frozen and slotted. Scanners only allocate a new state on a
transition; states without payload are module-level singletons.
"""

from __future__ import annotations

from dataclasses import dataclass

# =========================================================================
# HTML (normalizer and highlighter)
# =========================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Between tags: text content."""


@dataclass(frozen=True, slots=True)
class InTag:
    """Between ``<`` and ``>``, outside any quoted value.

    Attributes:
        name_seen: True once the tag name has been emitted, so later
            pieces of the interior are attributes.
    """

    name_seen: bool = False


@dataclass(frozen=True, slots=True)
class InAttributeValue:
    """Inside a quoted attribute value.

    Only ``quote`` closes the value; the other quote character is content.
    """

    quote: str


@dataclass(frozen=True, slots=True)
class InComment:
    """Between ``<!--`` and ``-->``."""


HtmlState = Text | InTag | InAttributeValue | InComment

TEXT = Text()
TAG_START = InTag()
TAG_AFTER_NAME = InTag(name_seen=True)
COMMENT = InComment()

# =========================================================================
# RSX
# =========================================================================


@dataclass(frozen=True, slots=True)
class Default:
    """Outside strings and comments: lexemes and separators."""


@dataclass(frozen=True, slots=True)
class InStringLiteral:
    """Inside a double-quoted string literal."""


@dataclass(frozen=True, slots=True)
class InLineComment:
    """From ``//`` to the end of the line."""


RsxState = Default | InStringLiteral | InLineComment

DEFAULT = Default()
STRING_LITERAL = InStringLiteral()
LINE_COMMENT = InLineComment()

__all__ = [
    "COMMENT",
    "DEFAULT",
    "LINE_COMMENT",
    "STRING_LITERAL",
    "TAG_AFTER_NAME",
    "TAG_START",
    "TEXT",
    "Default",
    "HtmlState",
    "InAttributeValue",
    "InComment",
    "InLineComment",
    "InStringLiteral",
    "InTag",
    "RsxState",
    "Text",
]
