"""Span and Category definitions for the html2rsx scanners.

Every scanner produces a stream of Span objects. A span is a contiguous
slice of the source text tagged with a single semantic category. Spans
never overlap and are yielded in source order, so joining their text
reproduces the scanned input exactly.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Semantic categories attached to spans.

    Organized by the scanner that produces them:
    - HTML (tag delimiters, tag/attribute names, attribute values, text)
    - RSX (string literals, keywords, attribute markers, numbers, braces)
    - Shared (comments, unwrapped pass-through)

    """

    # HTML
    TAG_DELIMITER = "tagDelimiter"  # < > and self-closing /
    TAG_NAME = "tagName"  # div, /div
    ATTRIBUTE_NAME = "attributeName"  # class in class="x"
    ATTRIBUTE_VALUE = "attributeValue"  # "x", quotes included
    TEXT = "plainText"  # Non-blank text content between tags

    # RSX
    STRING_LITERAL = "stringLiteral"
    KEYWORD = "keyword"
    ATTRIBUTE_MARKER = "attributeMarker"
    NUMERIC_LITERAL = "numericLiteral"
    BRACE = "brace"

    # Shared
    COMMENT = "comment"
    PLAIN = "plain"  # Emitted as-is, never wrapped

    @property
    def wrapped(self) -> bool:
        """True if spans of this category are wrapped in a marker."""
        return self is not Category.PLAIN


@dataclass(frozen=True, slots=True)
class Span:
    """A categorized slice of source text.

    Attributes:
        category: Semantic category of the slice
        text: The literal source text, unmodified
        offset: Absolute start offset in the scanned source

    """

    category: Category
    text: str
    offset: int = 0

    @property
    def end(self) -> int:
        """Absolute end offset (exclusive)."""
        return self.offset + len(self.text)

    def __repr__(self) -> str:
        return f"Span({self.category.name}, {self.text!r}, {self.offset})"


def merge_spans(spans: Iterable[Span]) -> list[Span]:
    """Coalesce adjacent spans that share a category.

    Args:
        spans: Spans in source order

    Returns:
        New list where no two neighbours have the same category
    """
    merged: list[Span] = []
    for span in spans:
        if not span.text:
            continue
        if merged and merged[-1].category is span.category:
            last = merged[-1]
            merged[-1] = Span(last.category, last.text + span.text, last.offset)
        else:
            merged.append(span)
    return merged


def join_spans(spans: Iterable[Span]) -> str:
    """Concatenate span text back into source text."""
    return "".join(span.text for span in spans)
