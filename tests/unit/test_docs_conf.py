"""Tests for the Sphinx configuration."""

import runpy
from pathlib import Path

from license_detector import __version__

DOCS_CONF = Path(__file__).resolve().parents[2] / "docs" / "conf.py"


def test_release_follows_package_version():
    """Test that the documented release is the installed package version."""
    conf = runpy.run_path(str(DOCS_CONF))

    assert conf["release"] == __version__
    assert conf["version"] == __version__
    assert "myst_parser" in conf["extensions"]
