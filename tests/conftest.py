"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def mit_fixture(fixtures_dir: Path) -> Path:
    """Return the path to a reflowed copy of the MIT license."""
    return fixtures_dir / "licenses" / "MIT"


@pytest.fixture
def mit_text(mit_fixture: Path) -> str:
    """Return the raw content of the MIT fixture."""
    return mit_fixture.read_text(encoding="utf-8")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
