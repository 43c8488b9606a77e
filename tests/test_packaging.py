"""Tests for the project metadata in pyproject.toml."""

import tomllib
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def _project() -> dict:
    with open(REPO_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]


@pytest.mark.unit
def test_readme_is_user_facing_document():
    readme = _project()["readme"]
    assert readme == "README.md"
    assert (REPO_ROOT / readme).is_file()


@pytest.mark.unit
def test_runtime_dependencies_declared():
    names = {dep.split(">")[0].split("=")[0] for dep in _project()["dependencies"]}
    assert {"pydantic", "python-dotenv"} <= names
