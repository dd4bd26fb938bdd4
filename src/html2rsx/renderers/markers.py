"""Marker renderer: spans to annotated display text.

Each wrapped span becomes ``<span class='CSS'>text</span>`` where CSS comes
from the active theme; PLAIN spans pass through as-is. Span text is emitted
raw unless ScanConfig.escape_html is set, in which case ``&``, ``<``, ``>``
and quotes are entity-escaped so the result can be inserted as live markup.

Thread Safety:
    Stateless functions; the StringBuilder is local to each call.

"""

from __future__ import annotations

import re
from collections.abc import Iterable

from html2rsx.config import ScanConfig, get_scan_config
from html2rsx.spans import Span
from html2rsx.stringbuilder import StringBuilder
from html2rsx.utils.text import escape_html

_MARKER_PATTERN = re.compile(r"<span class='[^'<>]*'>|</span>")


def render_spans(spans: Iterable[Span], config: ScanConfig | None = None) -> str:
    """Render spans as marker-wrapped text.

    Args:
        spans: Spans in source order
        config: Configuration to use (defaults to the active ScanConfig)

    Returns:
        Annotated text
    """
    if config is None:
        config = get_scan_config()
    escape = config.escape_html
    css_cache: dict[object, str] = {}

    sb = StringBuilder()
    for span in spans:
        text = escape_html(span.text) if escape else span.text
        if not span.category.wrapped:
            sb.append(text)
            continue
        css = css_cache.get(span.category)
        if css is None:
            css = escape_html(config.css_class(span.category))
            css_cache[span.category] = css
        sb.wrap(f"<span class='{css}'>", text, "</span>")
    return sb.build()


def strip_markers(text: str) -> str:
    """Remove every marker produced by render_spans.

    For output rendered without escaping, this returns the original source
    as long as the source itself contains no marker-shaped text.
    """
    return _MARKER_PATTERN.sub("", text)
