"""HTML normalizer run before structural conversion.

Two rewrites in one forward pass over the source:

1. Attribute aliases (``className=`` → ``class=``) are replaced, but only in
   attribute-name position inside a tag. The same text inside a quoted
   value, a comment or text content is left alone.
2. Whitespace in text content collapses to a single space. A blank run
   right after a tag close is dropped when the next character opens another
   tag, so ``</b>  <i>`` becomes ``</b><i>``. Inside tags, quoted values
   and comments every character is kept byte-exact.

The normalizer never fails and is idempotent:
``normalize(normalize(t)) == normalize(t)``.

Thread Safety:
Normalizer instances are single-use. Create one per source string.

"""

from __future__ import annotations

from collections.abc import Mapping

from html2rsx.config import get_scan_config
from html2rsx.scanners.html import COMMENT_CLOSE, COMMENT_OPEN, QUOTES
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
from html2rsx.stringbuilder import StringBuilder


class Normalizer:
    """Single-pass HTML normalizer.

    Usage:
            >>> Normalizer('<div  className="a   b">  Hi   there  </div>').normalize()
            '<div  class="a   b"> Hi there </div>'

    Complexity: O(n) where n = len(source).

    """

    __slots__ = ("_source", "_source_len", "_pos", "_state", "_after_tag_close", "_aliases", "_out")

    def __init__(self, source: str, aliases: Mapping[str, str] | None = None) -> None:
        """Initialize normalizer with source text.

        Args:
            source: HTML source text
            aliases: Attribute alias → canonical name (defaults to the
                active ScanConfig.attribute_aliases)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._state: HtmlState = TEXT
        self._after_tag_close = False
        if aliases is None:
            aliases = get_scan_config().attribute_aliases
        # (pattern, replacement) with the "=" folded into the pattern
        self._aliases: tuple[tuple[str, str], ...] = tuple(
            (f"{alias}=", f"{canonical}=") for alias, canonical in aliases.items()
        )
        self._out = StringBuilder()

    def normalize(self) -> str:
        """Run the pass and return the normalized text."""
        source_len = self._source_len
        while self._pos < source_len:
            match self._state:
                case Text():
                    self._scan_text()
                case InTag():
                    self._scan_tag()
                case InAttributeValue(quote=quote):
                    self._copy_through(quote, TAG_AFTER_NAME)
                case InComment():
                    self._copy_through(COMMENT_CLOSE, TEXT)
                    if self._state is TEXT:
                        self._after_tag_close = True
        return self._out.build()

    def _scan_text(self) -> None:
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == "<":
            self._after_tag_close = False
            if source.startswith(COMMENT_OPEN, pos):
                # Copy only "<!" so "<!-->" closes on its own dashes
                self._out.append("<!")
                self._state = COMMENT
                self._pos = pos + 2
            else:
                self._out.append("<")
                self._state = TAG_START
                self._pos = pos + 1
            return

        if char.isspace():
            end = pos + 1
            while end < self._source_len and source[end].isspace():
                end += 1
            between_tags = self._after_tag_close and end < self._source_len and source[end] == "<"
            if not between_tags and not self._out.last_char.isspace():
                self._out.append(" ")
            self._after_tag_close = False
            self._pos = end
            return

        # Copy the word up to the next whitespace or tag opening
        end = pos + 1
        while end < self._source_len and source[end] != "<" and not source[end].isspace():
            end += 1
        self._out.append(source[pos:end])
        self._after_tag_close = False
        self._pos = end

    def _scan_tag(self) -> None:
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == ">":
            self._out.append(">")
            self._state = TEXT
            self._after_tag_close = True
            self._pos = pos + 1
            return

        if char in QUOTES:
            self._out.append(char)
            self._state = InAttributeValue(char)
            self._pos = pos + 1
            return

        if pos > 0 and source[pos - 1].isspace():
            for pattern, replacement in self._aliases:
                if source.startswith(pattern, pos):
                    self._out.append(replacement)
                    self._pos = pos + len(pattern)
                    return

        self._out.append(char)
        self._pos = pos + 1

    def _copy_through(self, delimiter: str, next_state: HtmlState) -> None:
        """Copy verbatim up to and including delimiter, then switch state.

        Without a closing delimiter the rest of the source is copied.
        """
        close = self._source.find(delimiter, self._pos)
        if close == -1:
            self._out.append(self._source[self._pos :])
            self._pos = self._source_len
            return
        end = close + len(delimiter)
        self._out.append(self._source[self._pos : end])
        self._state = next_state
        self._pos = end


def normalize(html: str) -> str:
    """Normalize HTML before conversion.

    Rewrites attribute aliases from the active ScanConfig in attribute-name
    position and collapses text-content whitespace, leaving tags, quoted
    values and comments byte-exact.

    Args:
        html: HTML source text

    Returns:
        Normalized HTML

    Example:
        >>> normalize('<label htmlFor="x">  Name </label>')
        '<label for="x"> Name </label>'
    """
    return Normalizer(html).normalize()
