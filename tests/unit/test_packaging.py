"""Unit tests for project metadata."""

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def _requirement_names(requirements: list[str]) -> set[str]:
    return {req.split(">")[0].split("=")[0].split("<")[0].strip() for req in requirements}


def test_httpx_is_a_test_dependency_only() -> None:
    """httpx is only imported by tests; openai pulls it in at runtime."""
    project = tomllib.loads(PYPROJECT.read_text())["project"]

    assert "httpx" not in _requirement_names(project["dependencies"])
    assert "httpx" in _requirement_names(project["optional-dependencies"]["test"])
