"""Built-in release rules and release-type vocabulary.

Both values are read-only and are passed explicitly to the rule functions
in :mod:`bumpscope.core.rules`, which accept replacements as keyword
arguments.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from bumpscope.core.models import ReleaseRule

if TYPE_CHECKING:
    from collections.abc import Mapping

# Release types understood by the commit analyzer, in the same order it
# declares them.
DEFAULT_RELEASE_TYPES: tuple[str, ...] = (
    "major",
    "premajor",
    "minor",
    "preminor",
    "patch",
    "prepatch",
    "prerelease",
)

DEFAULT_CHANGELOG_RULES: Mapping[str, ReleaseRule] = MappingProxyType(
    {
        "feat": ReleaseRule(type="feat", release="minor", section="Features"),
        "fix": ReleaseRule(type="fix", release="patch", section="Bug Fixes"),
        "perf": ReleaseRule(type="perf", release="patch", section="Performance Improvements"),
        "revert": ReleaseRule(type="revert", release="patch", section="Reverts"),
        "docs": ReleaseRule(type="docs", release="patch", section="Documentation"),
        "style": ReleaseRule(type="style", release="patch", section="Styles"),
        "refactor": ReleaseRule(type="refactor", release="patch", section="Code Refactoring"),
        "test": ReleaseRule(type="test", release="patch", section="Tests"),
        "build": ReleaseRule(type="build", release="patch", section="Build Systems"),
        "ci": ReleaseRule(type="ci", release="patch", section="Continuous Integration"),
    }
)

# Commit types recognised by the scope filter.
SCOPED_COMMIT_TYPES: tuple[str, ...] = (
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
)
