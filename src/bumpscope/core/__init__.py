"""Core logic for bumpscope.

This module contains the fundamental building blocks:
- Tag validation, semver ordering and baseline selection
- Commit retrieval and conventional-commit scope filtering
- Custom release rule expansion and merging with the defaults
- Changelog preview rendering
"""

from __future__ import annotations

from bumpscope.core.changelog import generate_changelog
from bumpscope.core.commits import get_commits, get_scoped_commits
from bumpscope.core.defaults import DEFAULT_CHANGELOG_RULES, DEFAULT_RELEASE_TYPES
from bumpscope.core.models import Commit, HostCommit, ReleaseRule, RepositoryHost, Tag, TagCommit
from bumpscope.core.refs import get_branch_from_ref, is_pr
from bumpscope.core.rules import map_custom_release_rules, merge_with_default_changelog_rules
from bumpscope.core.tags import get_latest_prerelease_tag, get_latest_tag, get_valid_tags

__all__ = [
    # Defaults
    "DEFAULT_CHANGELOG_RULES",
    "DEFAULT_RELEASE_TYPES",
    # Models
    "Commit",
    "HostCommit",
    "ReleaseRule",
    "RepositoryHost",
    "Tag",
    "TagCommit",
    # Changelog
    "generate_changelog",
    # Refs
    "get_branch_from_ref",
    # Commits
    "get_commits",
    # Tags
    "get_latest_prerelease_tag",
    "get_latest_tag",
    "get_scoped_commits",
    "get_valid_tags",
    "is_pr",
    # Rules
    "map_custom_release_rules",
    "merge_with_default_changelog_rules",
]
