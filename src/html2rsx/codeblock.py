"""Code block rendering boundary.

Wraps highlighted text in the ``<pre>`` container the web front end shows.
The block's inner HTML is trusted: it is inserted as-is, so code that may
come from users should go through code_block(), which highlights with
escaping enabled.

Example:
    >>> from html2rsx.codeblock import code_block
    >>> block = code_block("<p>Hi</p>", "html")
    >>> block.html.startswith('<pre class="language-html')
    True
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from html2rsx.config import get_scan_config, scan_config_context
from html2rsx.highlighting import highlight
from html2rsx.utils.text import escape_html

PRE_CLASSES = "overflow-x-auto rounded-lg bg-dark-300/50 p-4 font-mono text-sm"


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """A displayable block of highlighted code.

    Attributes:
        highlighted: Annotated text, inserted without further escaping
        language: Language tag (e.g. "html", "rsx")

    """

    highlighted: str
    language: str

    @property
    def html(self) -> str:
        """The ``<pre>`` element for this block."""
        lang = escape_html(self.language)
        return (
            f'<pre class="language-{lang} {PRE_CLASSES}" style="white-space: pre;">'
            f"{self.highlighted}</pre>"
        )

    def __str__(self) -> str:
        return self.html


def render(highlighted: str, language: str) -> CodeBlock:
    """Wrap already highlighted text in a CodeBlock.

    Args:
        highlighted: Output of a highlighter
        language: Language tag

    Returns:
        CodeBlock ready for display
    """
    return CodeBlock(highlighted=highlighted, language=language)


def code_block(code: str, language: str) -> CodeBlock:
    """Highlight raw code and wrap it for display.

    HTML and RSX span text, and the unhighlighted fallback, are HTML-escaped
    regardless of the active configuration. Output of an injected highlighter
    for any other language is inserted as returned, so that highlighter must
    escape the code itself (Rosettes does).

    Args:
        code: Raw source code
        language: Language tag; unknown languages are shown unhighlighted

    Returns:
        CodeBlock ready for display
    """
    config = dataclasses.replace(get_scan_config(), escape_html=True)
    with scan_config_context(config):
        highlighted = highlight(code, language, config)
    return render(highlighted, language)
