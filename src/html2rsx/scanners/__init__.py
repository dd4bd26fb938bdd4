"""Single-pass lexical scanners for HTML and RSX source.

Architecture:
scanners/
├── __init__.py          # Re-exports
├── states.py            # Tagged-union scan states
├── tag.py               # Tag interior (tag name, attribute names)
├── html.py              # HtmlScanner (text, tags, values, comments)
├── classify.py          # RSX lexeme classification
└── rsx.py               # RsxScanner (strings, line comments, lexemes)

Every scanner yields Span objects whose text, joined, reproduces the input.

Usage:
    >>> from html2rsx.scanners import scan_html
    >>> for span in scan_html('<a href="/">x</a>'):
    ...     print(span)
"""

from html2rsx.scanners.classify import classify
from html2rsx.scanners.html import HtmlScanner, scan_html
from html2rsx.scanners.rsx import RsxScanner, scan_rsx
from html2rsx.scanners.tag import scan_tag_interior

__all__ = [
    "HtmlScanner",
    "RsxScanner",
    "classify",
    "scan_html",
    "scan_rsx",
    "scan_tag_interior",
]
