"""StringBuilder for O(n) output accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used as the growable output buffer of the
normalizer and the marker renderer.

Thread Safety:
StringBuilder instances are local to each call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.wrap("<span class='k'>", "div", "</span>")
            >>> sb.append(" {")
            >>> sb.build()
            "<span class='k'>div</span> {"

    Thread Safety:
        Instance is local to each call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_last")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._last: str = ""

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._last = s[-1]
        return self

    def wrap(self, opening: str, s: str, closing: str) -> StringBuilder:
        """Append ``s`` between an opening and a closing marker.

        Nothing is appended when ``s`` is empty, so no empty markers appear.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(opening)
            self._parts.append(s)
            self._parts.append(closing)
            self._last = closing[-1] if closing else s[-1]
        return self

    @property
    def last_char(self) -> str:
        """Last character appended, or "" if nothing was appended."""
        return self._last

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)
