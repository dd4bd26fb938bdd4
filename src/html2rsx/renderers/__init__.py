"""Renderers turning scanner output into display text.

- markers: spans to ``<span class='...'>`` annotated text
"""

from html2rsx.renderers.markers import render_spans, strip_markers

__all__ = [
    "render_spans",
    "strip_markers",
]
