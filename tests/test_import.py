"""Verify package imports work correctly."""


def test_import_orgtable() -> None:
    """Test that orgtable can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import orgtable

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert orgtable.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from orgtable import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Everything in __all__ resolves on the package."""
    import orgtable

    for name in orgtable.__all__:
        assert hasattr(orgtable, name), name
