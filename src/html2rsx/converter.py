"""Boundary to the external HTML-to-RSX converter.

Structural conversion (parsing HTML into a tree and pretty-printing it as
RSX) is not done here. It is delegated to a Converter; the default runs the
Dioxus CLI (``dx translate --raw <html>``). Converter failures surface as
ConversionError and are never masked.

Usage:
    from html2rsx.converter import convert, set_converter

    rsx = convert('<div className="a">Hi</div>')

    # Inject a converter (tests, other backends)
    class Upper:
        def convert(self, html: str) -> str:
            return html.upper()

    set_converter(Upper())
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from typing import Protocol

from html2rsx.config import get_scan_config
from html2rsx.errors import ConversionError, ConverterNotFoundError
from html2rsx.normalize import normalize
from html2rsx.utils.logger import get_logger

logger = get_logger(__name__)


class Converter(Protocol):
    """Protocol for HTML-to-RSX converters.

    Contract:
        - MUST raise ConversionError when the HTML cannot be converted
        - MUST NOT return partial output on failure
    """

    def convert(self, html: str) -> str:
        """Convert normalized HTML to formatted RSX source."""
        ...


class DxTranslateConverter:
    """Converter backed by the Dioxus CLI ``translate`` subcommand.

    The HTML is passed as the last command-line argument. Standard output
    is the RSX; a non-zero exit status is a conversion failure.

    Attributes:
        command: Command prefix (defaults to ScanConfig.converter_command)
        timeout: Seconds to wait (defaults to ScanConfig.converter_timeout)

    """

    __slots__ = ("command", "timeout")

    def __init__(
        self,
        command: Sequence[str] | None = None,
        timeout: float | None = None,
    ) -> None:
        config = get_scan_config()
        self.command: tuple[str, ...] = (
            tuple(command) if command is not None else config.converter_command
        )
        self.timeout = timeout if timeout is not None else config.converter_timeout

    def convert(self, html: str) -> str:
        """Run the converter on ``html``.

        Raises:
            ConverterNotFoundError: The executable is not installed
            ConversionError: The process failed or timed out, or ``html``
                starts with "-" and would be read as a command-line flag
        """
        if html.startswith("-"):
            raise ConversionError("HTML must not start with '-' (it would be read as a flag)")
        args = [*self.command, html]
        logger.debug("Running converter %r on %d characters", self.command[0], len(html))
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ConverterNotFoundError(self.command[0]) from e
        except subprocess.TimeoutExpired as e:
            logger.warning("Converter timed out after %ss", self.timeout)
            raise ConversionError(f"Converter timed out after {self.timeout}s") from e

        stdout = completed.stdout.decode("utf-8", errors="replace")
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace")
            logger.warning(
                "Converter exited with status %d: %s", completed.returncode, stderr.strip()
            )
            raise ConversionError(
                "Error converting HTML to RSX",
                returncode=completed.returncode,
                stderr=stderr,
            )
        return stdout


# Global converter (None means a DxTranslateConverter built on demand)
_converter: Converter | None = None


def set_converter(converter: Converter | None) -> None:
    """Set the global converter. Pass None to restore the default."""
    global _converter
    _converter = converter


def get_converter() -> Converter:
    """Get the global converter, defaulting to the Dioxus CLI."""
    if _converter is None:
        return DxTranslateConverter()
    return _converter


def convert(html: str, *, converter: Converter | None = None) -> str:
    """Normalize HTML and convert it to RSX.

    Args:
        html: Raw HTML source
        converter: Converter to use (defaults to the global converter)

    Returns:
        RSX source produced by the converter

    Raises:
        ConversionError: The converter failed
    """
    if converter is None:
        converter = get_converter()
    return converter.convert(normalize(html))
