"""Syntax highlighting entry points for html2rsx.

HTML and RSX are highlighted by the built-in scanners. Any other language
goes through an injectable highlighter; when the optional ``syntax`` extra
is installed, Rosettes is used automatically. Without one, code is returned
unchanged (escaped if ScanConfig.escape_html is set).

Usage:
    from html2rsx.highlighting import highlight, highlight_html

    highlight_html("<p>Hi</p>")
    highlight('div { "Hi" }', "rsx")

    # Manual injection for other languages
    from html2rsx.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f"<code class='{language}'>{code}</code>"

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from html2rsx.config import ScanConfig, get_scan_config
from html2rsx.renderers.markers import render_spans
from html2rsx.scanners.html import HtmlScanner
from html2rsx.scanners.rsx import RsxScanner
from html2rsx.scanners.tag import scan_tag_interior
from html2rsx.utils.logger import get_logger
from html2rsx.utils.text import escape_html

logger = get_logger(__name__)

BUILTIN_LANGUAGES = frozenset({"html", "rsx"})


def highlight_html(code: str, config: ScanConfig | None = None) -> str:
    """Annotate HTML source with category markers.

    Args:
        code: HTML source
        config: Configuration to use (defaults to the active ScanConfig)

    Returns:
        Source text with tag delimiters, tag names, attribute names,
        attribute values, comments and text content wrapped in markers
    """
    return render_spans(HtmlScanner(code).scan(), config)


def highlight_rsx(code: str, config: ScanConfig | None = None) -> str:
    """Annotate RSX source with category markers.

    Args:
        code: RSX source
        config: Configuration to use (defaults to the active ScanConfig)

    Returns:
        Source text with keywords, attribute markers, numbers, string
        literals, comments and braces wrapped in markers
    """
    return render_spans(RsxScanner(code, config).scan(), config)


def highlight_tag_interior(text: str, config: ScanConfig | None = None) -> str:
    """Annotate the interior of a single tag (no angle brackets)."""
    return render_spans(scan_tag_interior(text), config)


class Highlighter(Protocol):
    """Protocol for highlighters of languages other than HTML and RSX.

    Thread Safety:
        Implementations must be thread-safe. highlight() may be called
        concurrently.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code.

        Contract:
            - MUST NOT raise for bad input
            - MUST escape the code; the result is inserted as markup
            - SHOULD return code unchanged for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if the highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]

# Global highlighter for other languages
_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the highlighter used for languages other than HTML and RSX.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns markup.
            Pass None to clear the highlighter.
    """
    global _highlighter
    _highlighter = highlighter


def _try_import_rosettes() -> bool:
    """Try to import and configure the Rosettes highlighter."""
    global _highlighter, _tried_rosettes

    if _tried_rosettes:
        return _highlighter is not None

    _tried_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        return False

    class RosettesHighlighter:
        """Rosettes-based highlighter implementing the Highlighter protocol."""

        def highlight(self, code: str, language: str) -> str:
            result: str = rosettes.highlight(code, language=language)
            return result

        def supports_language(self, language: str) -> bool:
            try:
                result: bool = rosettes.supports_language(language)
                return result
            except Exception:
                return False

    _highlighter = RosettesHighlighter()
    return True


def get_highlighter() -> Highlighter | SimpleHighlighter | None:
    """Get the highlighter for other languages.

    Returns:
        The configured highlighter, or None if not set.
        Automatically tries to load Rosettes if not already configured.
    """
    if _highlighter is None:
        _try_import_rosettes()
    return _highlighter


def has_highlighter() -> bool:
    """Check if a highlighter for other languages is available."""
    if _highlighter is not None:
        return True
    return _try_import_rosettes()


def supports_language(language: str) -> bool:
    """Check if ``language`` gets real highlighting (not the plain fallback)."""
    if language.lower() in BUILTIN_LANGUAGES:
        return True
    highlighter = get_highlighter()
    if highlighter is not None and hasattr(highlighter, "supports_language"):
        return bool(highlighter.supports_language(language))
    return highlighter is not None


def highlight(code: str, language: str, config: ScanConfig | None = None) -> str:
    """Highlight code in the given language.

    ``html`` and ``rsx`` (case-insensitive) use the built-in scanners. Other
    languages use the configured highlighter; if none is available or it
    fails, the code is returned as-is.

    Args:
        code: Source code
        language: Language identifier
        config: Configuration to use (defaults to the active ScanConfig)

    Returns:
        Annotated text
    """
    if config is None:
        config = get_scan_config()

    lang = language.lower()
    if lang == "html":
        return highlight_html(code, config)
    if lang == "rsx":
        return highlight_rsx(code, config)

    highlighter = get_highlighter()
    if highlighter is not None:
        try:
            if hasattr(highlighter, "highlight") and callable(highlighter.highlight):
                return highlighter.highlight(code, language)
            elif callable(highlighter):
                return highlighter(code, language)
        except Exception:
            logger.debug("Highlighting failed for language %r", language, exc_info=True)

    return escape_html(code) if config.escape_html else code
