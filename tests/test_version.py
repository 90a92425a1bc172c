"""Check that the package version matches pyproject.toml."""

from pathlib import Path

import tomllib

import setenv

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_module_version_matches_project_version() -> None:
    pyproject = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    project_version = pyproject.get("project", {}).get("version")

    assert isinstance(project_version, str) and project_version
    assert setenv.__version__ == project_version
