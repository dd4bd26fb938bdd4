"""Single-pass RSX highlighting scanner.

Walks RSX source once, tracking string literals and ``//`` line comments.
Outside both, the source is cut into lexemes at separators (whitespace,
braces, parentheses, colons, commas) and each lexeme is classified.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from html2rsx.config import ScanConfig, get_scan_config
from html2rsx.scanners.classify import classify
from html2rsx.scanners.states import (
    DEFAULT,
    LINE_COMMENT,
    STRING_LITERAL,
    Default,
    InLineComment,
    InStringLiteral,
    RsxState,
)
from html2rsx.spans import Category, Span

SEPARATORS = frozenset("{}():,")
BRACES = frozenset("{}")
ESCAPE = "\\"


class RsxScanner:
    """Forward scanner producing categorized spans for RSX source.

    Usage:
            >>> [(s.category.name, s.text) for s in RsxScanner('p { "x" }').scan()]
            [('KEYWORD', 'p'), ('PLAIN', ' '), ('BRACE', '{'), ('PLAIN', ' '),
             ('STRING_LITERAL', '"x"'), ('PLAIN', ' '), ('BRACE', '}')]

    Complexity: O(n) where n = len(source).

    """

    __slots__ = ("_source", "_source_len", "_pos", "_token_start", "_state", "_config")

    def __init__(self, source: str, config: ScanConfig | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: RSX source text
            config: Configuration for lexeme classification (defaults to
                the active ScanConfig)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._token_start = 0
        self._state: RsxState = DEFAULT
        self._config = config if config is not None else get_scan_config()

    def scan(self) -> Iterator[Span]:
        """Scan source into a span stream.

        Yields:
            Spans in source order, covering the source exactly
        """
        source_len = self._source_len
        while self._pos < source_len:
            match self._state:
                case Default():
                    yield from self._scan_default()
                case InStringLiteral():
                    yield from self._scan_string()
                case InLineComment():
                    yield from self._scan_comment()

        yield from self._flush_at_eof()

    def _is_escaped(self, pos: int) -> bool:
        """True if the character at pos follows an odd run of backslashes."""
        source = self._source
        count = 0
        pos -= 1
        while pos >= 0 and source[pos] == ESCAPE:
            count += 1
            pos -= 1
        return count % 2 == 1

    # =========================================================================
    # Per-state scanning
    # =========================================================================

    def _scan_default(self) -> Iterator[Span]:
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == "/" and source.startswith("//", pos):
            yield from self._flush_lexeme(pos)
            self._state = LINE_COMMENT
            self._token_start = pos
            self._pos = pos + 2
            return

        if char == '"' and not self._is_escaped(pos):
            yield from self._flush_lexeme(pos)
            self._state = STRING_LITERAL
            self._token_start = pos
            self._pos = pos + 1
            return

        if char.isspace():
            yield from self._flush_lexeme(pos)
            end = pos + 1
            while end < self._source_len and source[end].isspace():
                end += 1
            yield Span(Category.PLAIN, source[pos:end], pos)
            self._token_start = self._pos = end
            return

        if char in SEPARATORS:
            yield from self._flush_lexeme(pos)
            category = Category.BRACE if char in BRACES else Category.PLAIN
            yield Span(category, char, pos)
            self._token_start = self._pos = pos + 1
            return

        self._pos = pos + 1

    def _scan_string(self) -> Iterator[Span]:
        source = self._source
        close = source.find('"', self._pos)
        while close != -1 and self._is_escaped(close):
            close = source.find('"', close + 1)
        if close == -1:
            self._pos = self._source_len
            return
        end = close + 1
        yield Span(Category.STRING_LITERAL, source[self._token_start : end], self._token_start)
        self._state = DEFAULT
        self._token_start = self._pos = end

    def _scan_comment(self) -> Iterator[Span]:
        newline = self._source.find("\n", self._pos)
        if newline == -1:
            self._pos = self._source_len
            return
        end = newline + 1
        yield Span(Category.COMMENT, self._source[self._token_start : end], self._token_start)
        self._state = DEFAULT
        self._token_start = self._pos = end

    # =========================================================================
    # Flushing
    # =========================================================================

    def _flush_lexeme(self, end: int) -> Iterator[Span]:
        start = self._token_start
        if start < end:
            lexeme = self._source[start:end]
            yield Span(classify(lexeme, self._config), lexeme, start)
        self._token_start = end

    def _flush_at_eof(self) -> Iterator[Span]:
        end = self._source_len
        start = self._token_start
        match self._state:
            case Default():
                yield from self._flush_lexeme(end)
            case InStringLiteral():
                # Unterminated literal: emitted as-is, no closing quote invented
                if start < end:
                    yield Span(Category.PLAIN, self._source[start:end], start)
            case InLineComment():
                if start < end:
                    yield Span(Category.COMMENT, self._source[start:end], start)
        self._token_start = end


def scan_rsx(source: str, config: ScanConfig | None = None) -> list[Span]:
    """Scan RSX source into spans.

    Args:
        source: RSX source text
        config: Configuration for lexeme classification (optional)

    Returns:
        List of spans covering the source exactly
    """
    return list(RsxScanner(source, config).scan())
