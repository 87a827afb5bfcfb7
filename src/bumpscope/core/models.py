"""Value types shared by the tag, commit and rule pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class TagCommit:
    """Commit a tag points at."""

    sha: str


@dataclass(frozen=True, slots=True)
class Tag:
    """A git tag as reported by the repository host."""

    name: str
    commit: TagCommit

    @property
    def sha(self) -> str:
        return self.commit.sha


@dataclass(frozen=True, slots=True)
class HostCommit:
    """Raw commit as returned by a commit comparison.

    ``message`` may be empty; such commits are dropped by
    :func:`bumpscope.core.commits.get_commits`.
    """

    sha: str
    message: str


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit that carries a message."""

    message: str
    hash: str

    @property
    def subject(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0]


@dataclass(frozen=True, slots=True)
class ReleaseRule:
    """Maps a commit type to a release type and a changelog section.

    ``breaking`` is ``None`` for the built-in rules, which match regardless
    of whether the commit is breaking.
    """

    type: str
    release: str
    section: str | None = None
    breaking: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "release": self.release,
            "section": self.section,
        }
        if self.breaking is not None:
            data["breaking"] = self.breaking
        return data


class RepositoryHost(Protocol):
    """Source of tags and commit comparisons."""

    def list_tags(self, fetch_all: bool) -> list[Tag]: ...

    def compare_commits(self, base: str | None, head: str) -> list[HostCommit]: ...
