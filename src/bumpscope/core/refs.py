"""Helpers for git refs and branch classification."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def get_branch_from_ref(ref: str) -> str:
    """``refs/heads/main`` -> ``main``."""
    return ref.replace("refs/heads/", "")


def is_pr(ref: str) -> bool:
    return "refs/pull/" in ref


def _matches_any(branch: str, patterns: Iterable[str]) -> bool:
    return any(re.fullmatch(pattern.strip(), branch) for pattern in patterns if pattern.strip())


def is_release_branch(branch: str, patterns: Iterable[str]) -> bool:
    """Check a branch name against release branch patterns (e.g. ``release/.*``)."""
    return _matches_any(branch, patterns)


def is_prerelease_branch(branch: str, patterns: Iterable[str]) -> bool:
    """Check a branch name against prerelease branch patterns."""
    return _matches_any(branch, patterns)
