"""Implementation of the 'plan' command.

The plan command reads tags and commits from the local repository and
shows everything the version bump needs, without changing anything.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bumpscope.cli.commands.rules import build_release_rules, rules_table
from bumpscope.config import load_config
from bumpscope.core.changelog import generate_changelog
from bumpscope.core.commits import get_commits, get_scoped_commits
from bumpscope.core.refs import get_branch_from_ref, is_pr, is_prerelease_branch, is_release_branch
from bumpscope.core.tags import (
    get_latest_prerelease_tag,
    get_latest_tag,
    get_valid_tags,
    parse_tag_version,
)
from bumpscope.exceptions import BumpScopeError
from bumpscope.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from bumpscope.config.models import BumpScopeConfig
    from bumpscope.core.models import Commit, ReleaseRule, Tag


@dataclass
class ReleasePlan:
    """Everything gathered for one bump decision."""

    branch: str
    is_pull_request: bool
    is_release_branch: bool
    is_prerelease_branch: bool
    prerelease_identifier: str | None
    latest_tag: Tag
    latest_prerelease_tag: Tag | None
    previous_tag: Tag
    scopes: list[str]
    commits: list[Commit] = field(default_factory=list)
    rules: list[ReleaseRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        def tag_dict(tag: Tag | None) -> dict[str, str] | None:
            if tag is None:
                return None
            return {"name": tag.name, "sha": tag.sha}

        return {
            "branch": self.branch,
            "is_pull_request": self.is_pull_request,
            "is_release_branch": self.is_release_branch,
            "is_prerelease_branch": self.is_prerelease_branch,
            "prerelease_identifier": self.prerelease_identifier,
            "latest_tag": tag_dict(self.latest_tag),
            "latest_prerelease_tag": tag_dict(self.latest_prerelease_tag),
            "previous_tag": tag_dict(self.previous_tag),
            "scopes": self.scopes,
            "commits": [{"message": c.message, "hash": c.hash} for c in self.commits],
            "rules": [rule.to_dict() for rule in self.rules],
        }


def build_plan(
    repo: GitRepository,
    config: BumpScopeConfig,
    *,
    head: str = "HEAD",
    scopes: list[str] | None = None,
    prerelease: str | None = None,
    fetch_all: bool = False,
) -> ReleasePlan:
    """Collect baselines, commits and rules for ``head``.

    Args:
        repo: Repository to read from
        config: Loaded configuration
        head: Ref being released
        scopes: Scopes overriding ``config.scopes``
        prerelease: Prerelease identifier overriding the configured one
        fetch_all: Read every tag even if the config does not ask for it

    Raises:
        GitError: If reading the repository fails
    """
    branch = repo.current_branch() if head == "HEAD" else get_branch_from_ref(head)
    release_branch = is_release_branch(branch, config.release_branches)
    prerelease_branch = is_prerelease_branch(branch, config.pre_release_branches)

    identifier = prerelease or config.append_to_pre_release_tag
    if identifier is None and prerelease_branch:
        identifier = branch

    prefix_regex = config.prefix_regex
    valid_tags = get_valid_tags(repo, prefix_regex, fetch_all or config.fetch_all_tags)
    latest_tag = get_latest_tag(valid_tags, prefix_regex, config.tag_prefix)
    latest_prerelease_tag = (
        get_latest_prerelease_tag(valid_tags, identifier, prefix_regex) if identifier else None
    )

    # A newer prerelease becomes the baseline for prerelease builds
    previous_tag = latest_tag
    if latest_prerelease_tag is not None:
        prerelease_version = parse_tag_version(latest_prerelease_tag.name, prefix_regex)
        latest_version = parse_tag_version(latest_tag.name, prefix_regex)
        if latest_version is None or (
            prerelease_version is not None and prerelease_version > latest_version
        ):
            previous_tag = latest_prerelease_tag

    base = None if previous_tag.sha == "HEAD" else previous_tag.sha
    commits = get_commits(repo, base, head)

    effective_scopes = list(scopes) if scopes else list(config.scopes)
    if effective_scopes:
        commits = get_scoped_commits(commits, effective_scopes)

    return ReleasePlan(
        branch=branch,
        is_pull_request=is_pr(head),
        is_release_branch=release_branch,
        is_prerelease_branch=prerelease_branch,
        prerelease_identifier=identifier,
        latest_tag=latest_tag,
        latest_prerelease_tag=latest_prerelease_tag,
        previous_tag=previous_tag,
        scopes=effective_scopes,
        commits=commits,
        rules=build_release_rules(config.custom_release_rules),
    )


def run_plan(
    path: str | None,
    head: str,
    scopes: list[str],
    prerelease: str | None,
    fetch_all: bool,
    output_json: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the plan command.

    Args:
        path: Optional path to project directory
        head: Ref being released
        scopes: Scopes overriding the configured ones
        prerelease: Prerelease identifier (e.g., "beta", "rc")
        fetch_all: Read the full tag history
        output_json: Print JSON instead of rich output
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except BumpScopeError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    repo = GitRepository(project_path)
    try:
        plan = build_plan(
            repo,
            config,
            head=head,
            scopes=scopes,
            prerelease=prerelease,
            fetch_all=fetch_all,
        )
    except BumpScopeError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if output_json:
        typer.echo(json.dumps(plan.to_dict(), indent=2))
        return

    prerelease_name = plan.latest_prerelease_tag.name if plan.latest_prerelease_tag else "-"
    branch_kind = (
        "release" if plan.is_release_branch else "prerelease" if plan.is_prerelease_branch else "other"
    )
    console.print(
        Panel(
            f"Branch: [cyan]{plan.branch}[/] ({branch_kind})\n"
            f"Latest tag: [green]{plan.latest_tag.name}[/]\n"
            f"Latest prerelease tag: [yellow]{prerelease_name}[/]\n"
            f"Comparing from: [cyan]{plan.previous_tag.name}[/]",
            title="[bold]Baseline[/]",
        )
    )

    if not plan.commits:
        scope_note = f" for scopes {', '.join(plan.scopes)}" if plan.scopes else ""
        console.print(f"[yellow]No commits found since {plan.previous_tag.name}{scope_note}.[/]")
    else:
        table = Table(title=f"Commits ({len(plan.commits)})")
        table.add_column("Hash", style="dim")
        table.add_column("Subject")
        for commit in plan.commits:
            table.add_row(commit.hash[:7], escape(commit.subject))
        console.print(table)

    console.print(rules_table(plan.rules))

    changelog = generate_changelog(plan.commits, plan.rules, "Unreleased")
    if changelog:
        console.print(Panel(escape(changelog), title="[bold]Changelog Preview[/]", border_style="dim"))
