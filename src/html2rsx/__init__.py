"""
html2rsx — HTML to Dioxus RSX conversion helpers

Single-pass lexical scanners that work directly on source text:
a normalizer that prepares HTML for structural conversion, and two syntax
highlighters (HTML and RSX) that annotate source with category markers
without changing a single character of it.

Quick Start:
    >>> from html2rsx import normalize, highlight_html, highlight_rsx
    >>> normalize('<div  className="a   b">  Hi   there  </div>')
    '<div  class="a   b"> Hi there </div>'
    >>> highlight_rsx("div {}")
    "<span class='text-blue-400'>div</span> <span class='text-yellow-500'>{</span><span class='text-yellow-500'>}</span>"

    >>> # Structural conversion is delegated to the Dioxus CLI
    >>> from html2rsx import convert
    >>> rsx = convert("<p>Hi</p>")  # doctest: +SKIP

Installation:
    pip install html2rsx              # Scanners and highlighters (zero deps)
    pip install html2rsx[syntax]      # + Rosettes for other languages
"""

from html2rsx.codeblock import CodeBlock, code_block, render
from html2rsx.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from html2rsx.converter import (
    Converter,
    DxTranslateConverter,
    convert,
    get_converter,
    set_converter,
)
from html2rsx.errors import (
    ConfigError,
    ConversionError,
    ConverterNotFoundError,
    Html2RsxError,
)
from html2rsx.highlighting import (
    highlight,
    highlight_html,
    highlight_rsx,
    highlight_tag_interior,
)
from html2rsx.normalize import Normalizer, normalize
from html2rsx.renderers.markers import render_spans, strip_markers
from html2rsx.scanners import (
    HtmlScanner,
    RsxScanner,
    classify,
    scan_html,
    scan_rsx,
    scan_tag_interior,
)
from html2rsx.spans import Category, Span, join_spans, merge_spans

__version__ = "0.1.0"

__all__ = [
    # Normalizer
    "Normalizer",
    "normalize",
    # Scanners
    "HtmlScanner",
    "RsxScanner",
    "classify",
    "scan_html",
    "scan_rsx",
    "scan_tag_interior",
    # Spans
    "Category",
    "Span",
    "join_spans",
    "merge_spans",
    # Highlighting
    "highlight",
    "highlight_html",
    "highlight_rsx",
    "highlight_tag_interior",
    "render_spans",
    "strip_markers",
    # Display
    "CodeBlock",
    "code_block",
    "render",
    # Conversion
    "Converter",
    "DxTranslateConverter",
    "convert",
    "get_converter",
    "set_converter",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "ConfigError",
    "ConversionError",
    "ConverterNotFoundError",
    "Html2RsxError",
    "__version__",
]
