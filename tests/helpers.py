"""Test doubles shared across test modules."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from bumpscope.core.models import HostCommit, Tag, TagCommit

if TYPE_CHECKING:
    from pathlib import Path


class FakeHost:
    """In-memory repository host."""

    def __init__(
        self,
        tags: list[Tag] | None = None,
        commits: list[HostCommit] | None = None,
    ) -> None:
        self.tags = tags or []
        self.commits = commits or []
        self.list_tags_calls: list[bool] = []
        self.compare_calls: list[tuple[str | None, str]] = []

    def list_tags(self, fetch_all: bool) -> list[Tag]:
        self.list_tags_calls.append(fetch_all)
        return list(self.tags)

    def compare_commits(self, base: str | None, head: str) -> list[HostCommit]:
        self.compare_calls.append((base, head))
        return list(self.commits)


def make_tags(*names: str) -> list[Tag]:
    """Build tags whose sha is derived from the name."""
    return [Tag(name=name, commit=TagCommit(sha=f"sha-{name}")) for name in names]


class GitSandbox:
    """Throwaway git repository driven through the real ``git`` binary."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.git("init", "--quiet", "--initial-branch=main")
        self.git("config", "user.name", "Test User")
        self.git("config", "user.email", "test@example.com")
        self.git("config", "commit.gpgsign", "false")
        self.git("config", "tag.gpgsign", "false")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
            cwd=self.path,
        )
        return result.stdout.strip()

    def commit(self, message: str) -> str:
        """Create an empty commit and return its sha."""
        if message:
            self.git("commit", "--quiet", "--allow-empty", "-m", message)
        else:
            self.git("commit", "--quiet", "--allow-empty", "--allow-empty-message", "-m", "")
        return self.git("rev-parse", "HEAD")

    def tag(self, name: str, message: str | None = None) -> None:
        """Tag HEAD; a message makes the tag annotated."""
        if message is None:
            self.git("tag", name)
        else:
            self.git("tag", "-a", name, "-m", message)
