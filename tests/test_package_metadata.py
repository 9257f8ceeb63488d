"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexg


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexg"
    assert poetry["version"] == hexg.__version__
    assert poetry["scripts"]["hexg"] == "hexg.__main__:main"

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "platformdirs", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert "pytest" in poetry["extras"]["test"]
