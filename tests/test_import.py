"""Verify package imports work correctly."""


def test_import_html2rsx() -> None:
    """Test that html2rsx can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import html2rsx

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert html2rsx.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from html2rsx import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    """Every name in __all__ resolves on the package."""
    import html2rsx

    for name in html2rsx.__all__:
        assert hasattr(html2rsx, name), name
