"""Shared pytest fixtures for tonekit tests."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def built_store():
    """Frozen theme store for the default brand (built once per session)."""
    from tonekit.theme import build_theme

    return build_theme()


@pytest.fixture
def brand_yaml(tmp_path: Path) -> Path:
    """Project directory holding a partial brand.yaml."""
    (tmp_path / "brand.yaml").write_text(
        "font:\n"
        "  sans_serif: \"Inter, 'Open Sans', sans-serif\"\n"
        "light:\n"
        "  primary: \"#FF0000\"\n"
        "dark:\n"
        "  surface: Grey 800\n",
        encoding="utf-8",
    )
    return tmp_path
