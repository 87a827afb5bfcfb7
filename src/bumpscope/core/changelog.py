"""Changelog preview from commits and merged release rules.

Commits are placed under the section of the rule whose type matches
their conventional-commit header. Commits whose type has no sectioned
rule are left out, matching how the release notes are built from the
same rule table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bumpscope.core.models import Commit, ReleaseRule

HEADER_PATTERN = re.compile(
    r"^(?P<type>\w+)(?:\((?P<scope>[^)]+)\))?(?P<breaking>!)?:\s*(?P<description>.+)$"
)
BREAKING_PATTERN = re.compile(r"^BREAKING[ -]CHANGE:", re.MULTILINE)


@dataclass(frozen=True)
class ChangelogEntry:
    """A commit with its parsed header."""

    commit: Commit
    commit_type: str
    scope: str | None
    description: str
    is_breaking: bool

    @classmethod
    def from_commit(cls, commit: Commit) -> ChangelogEntry | None:
        """Parse a commit header, or return None if it is not conventional."""
        match = HEADER_PATTERN.match(commit.subject.strip())
        if not match:
            return None
        return cls(
            commit=commit,
            commit_type=match.group("type"),
            scope=match.group("scope"),
            description=match.group("description").strip(),
            is_breaking=bool(match.group("breaking")) or bool(BREAKING_PATTERN.search(commit.message)),
        )


def group_commits_by_section(
    commits: Sequence[Commit],
    rules: Sequence[ReleaseRule],
) -> dict[str, list[ChangelogEntry]]:
    """Group commits under their rule's section, in rule order.

    Returns:
        Mapping of section title to entries; sections without commits are omitted
    """
    section_by_type = {rule.type: rule.section for rule in rules if rule.section}
    grouped: dict[str, list[ChangelogEntry]] = {
        section: [] for section in dict.fromkeys(section_by_type.values())
    }

    for commit in commits:
        entry = ChangelogEntry.from_commit(commit)
        if entry is None:
            continue
        section = section_by_type.get(entry.commit_type)
        if section is not None:
            grouped[section].append(entry)

    return {section: entries for section, entries in grouped.items() if entries}


def format_entry(entry: ChangelogEntry, *, include_sha: bool = False) -> str:
    scope = f"**{entry.scope}:** " if entry.scope else ""
    line = f"- {scope}{entry.description}"
    if include_sha:
        line += f" ({entry.commit.hash[:7]})"
    return line


def generate_changelog(
    commits: Sequence[Commit],
    rules: Sequence[ReleaseRule],
    version: str,
    *,
    include_sha: bool = False,
) -> str:
    """Render a Markdown changelog for a release.

    Breaking commits are only listed when their type has a sectioned rule.

    Args:
        commits: Commits included in the release
        rules: Merged release rules (see ``merge_with_default_changelog_rules``)
        version: Version heading
        include_sha: Append the short commit hash to every entry

    Returns:
        Changelog content, or an empty string when no commit has a section
    """
    grouped = group_commits_by_section(commits, rules)
    if not grouped:
        return ""

    lines = [
        f"## [{version}] - {datetime.now(UTC).strftime('%Y-%m-%d')}",
        "",
    ]

    # Breaking changes first
    breaking = [entry for entries in grouped.values() for entry in entries if entry.is_breaking]
    if breaking:
        lines.append("### ⚠ BREAKING CHANGES")
        lines.append("")
        lines.extend(format_entry(entry, include_sha=include_sha) for entry in breaking)
        lines.append("")

    for section, entries in grouped.items():
        lines.append(f"### {section}")
        lines.append("")
        lines.extend(format_entry(entry, include_sha=include_sha) for entry in entries)
        lines.append("")

    return "\n".join(lines)
