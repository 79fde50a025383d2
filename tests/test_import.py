"""Verify package imports work correctly."""


def test_import_minire() -> None:
    """Test that minire can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import minire

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert minire.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from minire import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    import minire

    for name in minire.__all__:
        assert hasattr(minire, name), name
