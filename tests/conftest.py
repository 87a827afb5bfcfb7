"""Shared test fixtures."""

from __future__ import annotations

import re
import shutil
from typing import TYPE_CHECKING

import pytest
import structlog

from bumpscope.core.models import Commit
from tests.helpers import GitSandbox

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo structlog configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def v_prefix() -> re.Pattern[str]:
    return re.compile(r"^v")


@pytest.fixture
def sample_commits() -> list[Commit]:
    """A mix of scoped, unscoped and breaking commits."""
    return [
        Commit(message="feat(api): add user endpoint", hash="a1"),
        Commit(message="fix(web): handle empty form", hash="b2"),
        Commit(message="chore: bump dependencies", hash="c3"),
        Commit(message="docs: explain release rules", hash="d4"),
        Commit(
            message="build(api): switch bundler\n\nBREAKING CHANGE: node 20 required",
            hash="e5",
        ),
        Commit(message="Merge branch 'main' into feature", hash="f6"),
    ]


@pytest.fixture
def temp_project_with_pyproject(tmp_path: Path) -> Path:
    """A project directory with a [tool.bumpscope] table."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.bumpscope]
tag_prefix = "release-"
custom_release_rules = "build:patch,chore:minor:Chores"
scopes = ["api"]
pre_release_branches = ["develop"]
"""
    )
    return tmp_path


@pytest.fixture
def git_sandbox(tmp_path: Path) -> GitSandbox:
    """An empty git repository on branch ``main``."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return GitSandbox(tmp_path)
