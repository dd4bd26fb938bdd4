"""Exception classes for html2rsx.

The scanners and the normalizer never raise. Errors only originate at the
boundary with the external structural converter, or from invalid
configuration handed to ScanConfig.from_dict.
"""

from __future__ import annotations


class Html2RsxError(Exception):
    """Base exception for all html2rsx errors.

    Subclass this for specific error categories.
    """

    pass


class ConversionError(Html2RsxError):
    """Error reported by the external HTML-to-RSX converter.

    Raised when the converter exits unsuccessfully, times out, or otherwise
    fails to produce RSX for the given HTML.
    """

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialize conversion error with optional process details.

        Args:
            message: Error description
            returncode: Exit status of the converter process (optional)
            stderr: Captured standard error of the converter (optional)
        """
        self.message = message
        self.returncode = returncode
        self.stderr = stderr

        details = ""
        if returncode is not None:
            details = f" (exit status {returncode})"
        if stderr and stderr.strip():
            details += f": {stderr.strip()}"

        super().__init__(f"{message}{details}")


class ConverterNotFoundError(ConversionError):
    """The converter executable could not be located."""

    def __init__(self, command: str) -> None:
        """Initialize with the command that was not found.

        Args:
            command: Executable name or path that failed to launch
        """
        self.command = command
        super().__init__(f"Converter executable not found: {command!r}")


class ConfigError(Html2RsxError):
    """Invalid configuration value."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Invalid config '{key}': {message}")
