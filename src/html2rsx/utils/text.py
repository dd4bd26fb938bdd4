"""Text helpers shared by the renderers.

Example:
    >>> from html2rsx.utils.text import escape_html
    >>> escape_html("<p class='a'>")
    '&lt;p class=&#x27;a&#x27;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe embedding in markup.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def is_blank(text: str) -> bool:
    """True if text is empty or whitespace only."""
    return not text.strip()
