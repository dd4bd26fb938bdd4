"""Single-pass HTML highlighting scanner.

Walks HTML source once, left to right, tracking whether the cursor is in
text, inside a tag, inside a quoted attribute value, or inside a comment.
Tag interiors are handed to scan_tag_interior; everything else becomes a
span directly. No tree is built and nothing is validated.

Malformed input never fails: at end of input whatever is pending is
flushed as if its closing delimiter had been reached.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from html2rsx.scanners.states import (
    COMMENT,
    TAG_AFTER_NAME,
    TAG_START,
    TEXT,
    HtmlState,
    InAttributeValue,
    InComment,
    InTag,
    Text,
)
from html2rsx.scanners.tag import scan_tag_interior
from html2rsx.spans import Category, Span
from html2rsx.utils.text import is_blank

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
QUOTES = frozenset("\"'")


class HtmlScanner:
    """Forward scanner producing categorized spans for HTML source.

    Usage:
            >>> [s.category.name for s in HtmlScanner("<p>Hi</p>").scan()]
            ['TAG_DELIMITER', 'TAG_NAME', 'TAG_DELIMITER', 'TEXT',
             'TAG_DELIMITER', 'TAG_NAME', 'TAG_DELIMITER']

    Complexity: O(n) where n = len(source); multi-character delimiters use
    O(1) look-ahead or str.find.

    """

    __slots__ = ("_source", "_source_len", "_pos", "_token_start", "_state")

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: HTML source text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._token_start = 0
        self._state: HtmlState = TEXT

    def scan(self) -> Iterator[Span]:
        """Scan source into a span stream.

        Yields:
            Spans in source order, covering the source exactly
        """
        source_len = self._source_len
        while self._pos < source_len:
            match self._state:
                case Text():
                    yield from self._scan_text()
                case InTag():
                    yield from self._scan_tag()
                case InAttributeValue():
                    yield from self._scan_attribute_value()
                case InComment():
                    yield from self._scan_comment()

        yield from self._flush_at_eof()

    # =========================================================================
    # Per-state scanning
    # =========================================================================

    def _scan_text(self) -> Iterator[Span]:
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == "<" and source.startswith(COMMENT_OPEN, pos):
            yield from self._flush_text(pos)
            self._state = COMMENT
            self._token_start = pos
            # "<!-->" and "<!--->" close immediately
            self._pos = pos + 2
            return

        if char == "<" and pos + 1 < self._source_len and source[pos + 1] != "!":
            yield from self._flush_text(pos)
            yield Span(Category.TAG_DELIMITER, "<", pos)
            self._state = TAG_START
            self._token_start = self._pos = pos + 1
            return

        # Jump to the next candidate tag opening
        next_lt = source.find("<", pos + 1)
        self._pos = next_lt if next_lt != -1 else self._source_len

    def _scan_tag(self) -> Iterator[Span]:
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == ">":
            yield from self._flush_interior(pos)
            yield Span(Category.TAG_DELIMITER, ">", pos)
            self._state = TEXT
            self._token_start = self._pos = pos + 1
        elif char in QUOTES:
            yield from self._flush_interior(pos)
            self._state = InAttributeValue(char)
            self._token_start = pos
            self._pos = pos + 1
        elif char.isspace():
            yield from self._flush_interior(pos)
            end = pos + 1
            while end < self._source_len and source[end].isspace():
                end += 1
            yield Span(Category.PLAIN, source[pos:end], pos)
            self._token_start = self._pos = end
        else:
            self._pos = pos + 1

    def _scan_attribute_value(self) -> Iterator[Span]:
        state = self._state
        assert isinstance(state, InAttributeValue)
        close = self._source.find(state.quote, self._pos)
        if close == -1:
            self._pos = self._source_len
            return
        end = close + 1
        yield Span(Category.ATTRIBUTE_VALUE, self._source[self._token_start : end], self._token_start)
        self._state = TAG_AFTER_NAME
        self._token_start = self._pos = end

    def _scan_comment(self) -> Iterator[Span]:
        close = self._source.find(COMMENT_CLOSE, self._pos)
        if close == -1:
            self._pos = self._source_len
            return
        end = close + len(COMMENT_CLOSE)
        yield Span(Category.COMMENT, self._source[self._token_start : end], self._token_start)
        self._state = TEXT
        self._token_start = self._pos = end

    # =========================================================================
    # Flushing
    # =========================================================================

    def _flush_text(self, end: int) -> Iterator[Span]:
        """Emit pending text; blank runs pass through unwrapped."""
        start = self._token_start
        if start < end:
            text = self._source[start:end]
            category = Category.PLAIN if is_blank(text) else Category.TEXT
            yield Span(category, text, start)
        self._token_start = end

    def _flush_interior(self, end: int) -> Iterator[Span]:
        """Emit the pending tag interior through the tag interior scanner."""
        start = self._token_start
        if start < end:
            state = self._state
            name_seen = isinstance(state, InTag) and state.name_seen
            interior = self._source[start:end]
            yield from scan_tag_interior(interior, start, name_seen=name_seen)
            if not name_seen and interior.strip():
                self._state = TAG_AFTER_NAME
        self._token_start = end

    def _flush_at_eof(self) -> Iterator[Span]:
        """Flush the pending token as if its closing delimiter were reached."""
        end = self._source_len
        start = self._token_start
        match self._state:
            case Text():
                yield from self._flush_text(end)
            case InTag():
                yield from self._flush_interior(end)
            case InAttributeValue():
                if start < end:
                    yield Span(Category.ATTRIBUTE_VALUE, self._source[start:end], start)
            case InComment():
                if start < end:
                    yield Span(Category.COMMENT, self._source[start:end], start)
        self._token_start = end


def scan_html(source: str) -> list[Span]:
    """Scan HTML source into spans.

    Args:
        source: HTML source text

    Returns:
        List of spans covering the source exactly
    """
    return list(HtmlScanner(source).scan())
