"""Tag interior scanner.

Splits the raw interior of a single HTML tag (the text between ``<`` and
``>``, or a fragment of it that lies between quoted values) into tag-name and
attribute-name spans. Quoted values are handled by the HTML scanner; this
scanner only ever sees the unquoted parts.
"""

from __future__ import annotations

from html2rsx.spans import Category, Span


def scan_tag_interior(text: str, offset: int = 0, *, name_seen: bool = False) -> list[Span]:
    """Categorize the pieces of a tag interior.

    The interior is split on runs of whitespace. The first piece is the tag
    name (``div``, or ``/div`` for a closing tag) unless ``name_seen`` says the
    caller already emitted it. Each later piece is an attribute: the part
    before its first ``=`` is the attribute name and the rest (``=`` and any
    unquoted value) passes through unwrapped. A lone ``/`` is the
    self-closing marker. Whitespace is preserved verbatim.

    Args:
        text: Raw interior text
        offset: Absolute offset of ``text`` in the scanned source
        name_seen: True if the tag name precedes this fragment

    Returns:
        Spans covering ``text`` exactly, in order

    Example:
        >>> [s.text for s in scan_tag_interior('a href=x  download')]
        ['a', ' ', 'href', '=x', '  ', 'download']
    """
    spans: list[Span] = []
    text_len = len(text)
    pos = 0
    expect_name = not name_seen

    while pos < text_len:
        start = pos
        if text[pos].isspace():
            while pos < text_len and text[pos].isspace():
                pos += 1
            spans.append(Span(Category.PLAIN, text[start:pos], offset + start))
            continue

        while pos < text_len and not text[pos].isspace():
            pos += 1
        piece = text[start:pos]

        if expect_name:
            expect_name = False
            _append_tag_name(spans, piece, offset + start)
        elif piece == "/":
            spans.append(Span(Category.TAG_DELIMITER, piece, offset + start))
        else:
            _append_attribute(spans, piece, offset + start)

    return spans


def _append_tag_name(spans: list[Span], piece: str, offset: int) -> None:
    # <br/> : the trailing slash is the self-closing marker, not part of the name
    if len(piece) > 1 and piece.endswith("/"):
        spans.append(Span(Category.TAG_NAME, piece[:-1], offset))
        spans.append(Span(Category.TAG_DELIMITER, "/", offset + len(piece) - 1))
    else:
        spans.append(Span(Category.TAG_NAME, piece, offset))


def _append_attribute(spans: list[Span], piece: str, offset: int) -> None:
    eq = piece.find("=")
    if eq == -1:
        spans.append(Span(Category.ATTRIBUTE_NAME, piece, offset))
        return
    if eq > 0:
        spans.append(Span(Category.ATTRIBUTE_NAME, piece[:eq], offset))
    spans.append(Span(Category.PLAIN, piece[eq:], offset + eq))

