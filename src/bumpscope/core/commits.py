"""Commit retrieval and scope filtering."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bumpscope.core.defaults import SCOPED_COMMIT_TYPES
from bumpscope.core.models import Commit

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from bumpscope.core.models import RepositoryHost


def get_commits(host: RepositoryHost, base_ref: str | None, head_ref: str) -> list[Commit]:
    """Get the commits between two refs.

    Commits without a message are dropped. Host errors propagate as-is.

    Args:
        host: Commit source
        base_ref: Exclusive lower bound (None for the whole history)
        head_ref: Inclusive upper bound

    Returns:
        Commits in the order the host returns them
    """
    return [
        Commit(message=commit.message, hash=commit.sha)
        for commit in host.compare_commits(base_ref, head_ref)
        if commit.message
    ]


def scope_pattern(scope: str) -> re.Pattern[str]:
    """Build the header pattern for a scope.

    The scope is inserted verbatim, so regex metacharacters in it are
    interpreted.
    """
    types = "|".join(SCOPED_COMMIT_TYPES)
    return re.compile(rf"^({types})\({scope}\): [\w ]+", re.ASCII)


def get_scoped_commits(commits: Iterable[Commit], scopes: Sequence[str]) -> list[Commit]:
    """Keep commits whose header names at least one of ``scopes``.

    Example:
        ``feat(api): add endpoint`` is kept for ``scopes=["api"]``;
        ``chore: bump deps`` never is.
    """
    patterns = [scope_pattern(scope) for scope in scopes]
    return [
        commit
        for commit in commits
        if any(pattern.match(commit.message) for pattern in patterns)
    ]
