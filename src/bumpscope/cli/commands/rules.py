"""Implementation of the 'rules' command.

Prints the release rule table the commit analyzer should use.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.table import Table

from bumpscope.config import load_config
from bumpscope.core.rules import map_custom_release_rules, merge_with_default_changelog_rules
from bumpscope.exceptions import BumpScopeError

if TYPE_CHECKING:
    from rich.console import Console

    from bumpscope.core.models import ReleaseRule


def build_release_rules(custom_release_rules: str) -> list[ReleaseRule]:
    """Expand custom rules (if any) and merge them with the defaults."""
    mapped = map_custom_release_rules(custom_release_rules) if custom_release_rules.strip() else []
    return merge_with_default_changelog_rules(mapped)


def rules_table(rules: list[ReleaseRule], title: str = "Release Rules") -> Table:
    table = Table(title=title)
    table.add_column("Type", style="cyan")
    table.add_column("Release", style="green")
    table.add_column("Section")
    table.add_column("Breaking", style="dim")
    for rule in rules:
        breaking = "" if rule.breaking is None else str(rule.breaking).lower()
        table.add_row(rule.type, rule.release, rule.section or "", breaking)
    return table


def run_rules(
    path: str | None,
    custom: str | None,
    output_json: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the rules command.

    Args:
        path: Optional path to project directory
        custom: Custom rules overriding the configured ones
        output_json: Print JSON instead of a table
        console: Console for standard output
        err_console: Console for error output
    """
    if custom is None:
        try:
            config = load_config(Path(path) if path else Path.cwd())
        except BumpScopeError as e:
            err_console.print(f"[red]Error loading config:[/] {e}")
            raise SystemExit(1) from e
        custom = config.custom_release_rules

    rules = build_release_rules(custom)

    if output_json:
        typer.echo(json.dumps([rule.to_dict() for rule in rules], indent=2))
        return

    console.print(rules_table(rules))
