"""Local git repository as a source of tags and commits.

All access goes through ``git`` subprocesses; nothing is fetched from a
remote. Output is requested with NUL and record-separator delimiters so
multi-line commit messages survive parsing.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from bumpscope.core.models import HostCommit, Tag, TagCommit
from bumpscope.exceptions import GitError
from bumpscope.logging import get_logger

logger = get_logger(__name__)

# Number of tags read when the full history is not requested.
RECENT_TAG_COUNT = 100

# Output separators, emitted by git from %00, %x00 and %x1e.
_FIELD_SEP = "\x00"
_RECORD_SEP = "\x1e"


class GitRepository:
    """Read-only view of a local git repository."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else Path.cwd()

    def _run(self, *args: str) -> str:
        cmd = ["git", *args]
        logger.debug("running git", args=list(args), cwd=str(self.path))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def list_tags(self, fetch_all: bool) -> list[Tag]:
        """List tags, most recently created first.

        Annotated tags resolve to the commit they point at.

        Args:
            fetch_all: Read every tag; otherwise only the most recent
                ``RECENT_TAG_COUNT`` tags are read
        """
        args = [
            "for-each-ref",
            "--sort=-creatordate",
            "--format=%(refname:lstrip=2)%00%(objectname)%00%(*objectname)",
        ]
        if not fetch_all:
            args.append(f"--count={RECENT_TAG_COUNT}")
        args.append("refs/tags")

        tags: list[Tag] = []
        for line in self._run(*args).splitlines():
            if not line.strip():
                continue
            name, sha, peeled = line.split(_FIELD_SEP)
            tags.append(Tag(name=name, commit=TagCommit(sha=peeled or sha)))
        return tags

    def compare_commits(self, base: str | None, head: str) -> list[HostCommit]:
        """List commits reachable from ``head`` but not from ``base``, oldest first.

        Args:
            base: Exclusive lower bound; None walks the whole history of ``head``
            head: Inclusive upper bound
        """
        revision = head if base is None else f"{base}..{head}"
        output = self._run(
            "log",
            "--reverse",
            "--format=%H%x00%B%x1e",
            revision,
        )

        commits: list[HostCommit] = []
        for record in output.split(_RECORD_SEP):
            record = record.lstrip("\n")
            if not record:
                continue
            sha, message = record.split(_FIELD_SEP, 1)
            commits.append(HostCommit(sha=sha, message=message.strip()))
        return commits

    def current_branch(self) -> str:
        """Name of the checked out branch (``HEAD`` when detached)."""
        return self._run("rev-parse", "--abbrev-ref", "HEAD").strip()
