"""
Packaging layout tests.

The top-level package and routers/ have no __init__.py, so the build must
discover namespace packages or the wheel ships empty.
"""

from pathlib import Path

from setuptools import find_namespace_packages

ROOT = Path(__file__).resolve().parent.parent


def test_all_subpackages_discovered_as_namespace_packages():
    packages = set(find_namespace_packages(where=str(ROOT), include=["downtime_cost*"]))
    assert {"downtime_cost", "downtime_cost.engine", "downtime_cost.routers"} <= packages


def test_pyproject_enables_namespace_discovery():
    text = (ROOT / "pyproject.toml").read_text()
    section = text.split("[tool.setuptools.packages.find]", 1)[1].split("\n[", 1)[0]
    assert 'include = ["downtime_cost*"]' in section
    assert "namespaces = true" in section
