"""Shared pytest fixtures and test helpers for shapeguard tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from shapeguard.config.settings import ShapeguardSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SHAPEGUARD_* environment out of the tests."""
    monkeypatch.delenv("SHAPEGUARD_CONFIG", raising=False)
    monkeypatch.delenv("SHAPEGUARD_QUIET", raising=False)
    monkeypatch.delenv("SHAPEGUARD_JSON_OUTPUT", raising=False)
    monkeypatch.delenv("SHAPEGUARD_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sg = logging.getLogger("shapeguard")
    sg_level = sg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sg.setLevel(sg_level)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD, with no shapeguard.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> ShapeguardSettings:
    """Default settings rooted at an empty temporary project."""
    return ShapeguardSettings.from_cli(project_root=project_root)


def write_config(root: Path, text: str) -> Path:
    """Write a shapeguard.toml into *root* and return its path."""
    path = root / "shapeguard.toml"
    path.write_text(text, encoding="utf-8")
    return path


LOCAL_GUARDS = """\
from shapeguard import Number, Schema

Point = Schema({"x": Number(0), "y": Number(0)})
"""


@pytest.fixture
def local_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Project dir (CWD) holding its own ``localshapes`` guard package.

    The directory is kept off ``sys.path``, as it is for an installed
    console script.
    """
    package = project_root / "localshapes"
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "guards.py").write_text(LOCAL_GUARDS)
    hidden = ("", ".", str(project_root), str(project_root.resolve()))
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p not in hidden])
    yield project_root
    for name in ("localshapes.guards", "localshapes"):
        sys.modules.pop(name, None)
