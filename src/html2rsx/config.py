"""ContextVar-based scan configuration for html2rsx.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The normalizer, the classifier, the highlighters and the converter all read
the active ScanConfig; nothing is passed through the scanners themselves.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from html2rsx.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(escape_html=True)):
        markup = highlight_html("<p>a < b</p>")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from html2rsx.errors import ConfigError
from html2rsx.spans import Category

# JSX-style attribute names and the HTML attribute they stand for
DEFAULT_ATTRIBUTE_ALIASES: Mapping[str, str] = {
    "className": "class",
    "htmlFor": "for",
}

# Element names highlighted as RSX keywords
DEFAULT_RSX_KEYWORDS: frozenset[str] = frozenset(
    {
        "rsx",
        "div",
        "span",
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "a",
        "button",
        "input",
        "textarea",
        "form",
        "img",
        "nav",
        "footer",
        "header",
        "main",
        "section",
        "article",
    }
)

# Bare attribute identifiers highlighted as attribute markers
DEFAULT_RSX_ATTRIBUTES: frozenset[str] = frozenset({"class", "style"})

# Tailwind palette used by the web front end
DEFAULT_THEME: Mapping[Category, str] = {
    Category.TAG_DELIMITER: "text-blue-400",
    Category.TAG_NAME: "text-blue-400",
    Category.ATTRIBUTE_NAME: "text-purple-400",
    Category.ATTRIBUTE_VALUE: "text-green-400",
    Category.TEXT: "text-white",
    Category.STRING_LITERAL: "text-green-400",
    Category.KEYWORD: "text-blue-400",
    Category.ATTRIBUTE_MARKER: "text-purple-400",
    Category.NUMERIC_LITERAL: "text-orange-400",
    Category.BRACE: "text-yellow-500",
    Category.COMMENT: "text-gray-500",
}


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        attribute_aliases: Attribute names rewritten by the normalizer
        rsx_keywords: Lexemes classified as KEYWORD in RSX source
        rsx_attributes: Bare lexemes classified as ATTRIBUTE_MARKER
        theme: CSS class emitted for each wrapped category
        escape_html: HTML-escape span text when rendering markers
        converter_command: Command line prefix of the external converter
        converter_timeout: Seconds before the converter is abandoned

    """

    attribute_aliases: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_ATTRIBUTE_ALIASES)
    )
    rsx_keywords: frozenset[str] = DEFAULT_RSX_KEYWORDS
    rsx_attributes: frozenset[str] = DEFAULT_RSX_ATTRIBUTES
    theme: Mapping[Category, str] = field(default_factory=lambda: dict(DEFAULT_THEME))
    escape_html: bool = False
    converter_command: tuple[str, ...] = ("dx", "translate", "--raw")
    converter_timeout: float | None = 30.0

    def css_class(self, category: Category) -> str:
        """CSS class for a category, falling back to its marker name."""
        return self.theme.get(category, category.value)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Useful when config comes from external sources (JSON, TOML, query
        parameters). Unknown keys are silently ignored. Theme keys may be
        Category members, enum names ("TAG_NAME") or marker names ("tagName").

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Raises:
            ConfigError: If a known key holds a value of the wrong shape.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "escape_html": True,
            ...     "theme": {"keyword": "kw"},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.css_class(Category.KEYWORD)
            'kw'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        if "attribute_aliases" in filtered:
            filtered["attribute_aliases"] = _string_mapping(
                "attribute_aliases", filtered["attribute_aliases"]
            )
        for key in ("rsx_keywords", "rsx_attributes"):
            if key in filtered:
                filtered[key] = _string_set(key, filtered[key])
        if "theme" in filtered:
            filtered["theme"] = _theme(filtered["theme"])
        if "converter_command" in filtered:
            command = filtered["converter_command"]
            if isinstance(command, str):
                command = command.split()
            filtered["converter_command"] = tuple(_string_list("converter_command", command))
            if not filtered["converter_command"]:
                raise ConfigError("converter_command", "must not be empty")
        return cls(**filtered)


def _string_list(key: str, value: Any) -> list[str]:
    if isinstance(value, str) or not hasattr(value, "__iter__"):
        raise ConfigError(key, f"expected a list of strings, got {type(value).__name__}")
    items = list(value)
    for item in items:
        if not isinstance(item, str):
            raise ConfigError(key, f"expected strings, got {type(item).__name__}")
    return items


def _string_set(key: str, value: Any) -> frozenset[str]:
    return frozenset(_string_list(key, value))


def _string_mapping(key: str, value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigError(key, f"expected a mapping, got {type(value).__name__}")
    for name, target in value.items():
        if not isinstance(name, str) or not isinstance(target, str) or not name:
            raise ConfigError(key, f"expected non-empty string pairs, got {name!r}: {target!r}")
    return dict(value)


def _theme(value: Any) -> dict[Category, str]:
    if not isinstance(value, Mapping):
        raise ConfigError("theme", f"expected a mapping, got {type(value).__name__}")
    theme = dict(DEFAULT_THEME)
    for name, css in value.items():
        if not isinstance(css, str):
            raise ConfigError(
                "theme", f"CSS class for {name!r} must be a string, got {type(css).__name__}"
            )
        theme[_category(name)] = css
    return theme


def _category(name: Any) -> Category:
    if isinstance(name, Category):
        return name
    if isinstance(name, str):
        if name in Category.__members__:
            return Category[name]
        try:
            return Category(name)
        except ValueError:
            pass
    raise ConfigError("theme", f"unknown category {name!r}")


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

# Thread-local configuration via ContextVar
_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(escape_html=True)):
        ...     highlight_html("<b>1 < 2</b>")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_ATTRIBUTE_ALIASES",
    "DEFAULT_RSX_ATTRIBUTES",
    "DEFAULT_RSX_KEYWORDS",
    "DEFAULT_THEME",
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
