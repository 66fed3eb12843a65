"""Tests for the declared package metadata."""

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).parents[1] / "pyproject.toml"


def test_requires_python_allows_typeis() -> None:
    """Test that the minimum interpreter ships `typing.TypeIs`."""
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    assert project["requires-python"] == ">=3.13"
