"""CLI entry point for bumpscope."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from bumpscope import __version__
from bumpscope.cli.commands.plan import run_plan
from bumpscope.cli.commands.rules import run_rules
from bumpscope.logging import configure_logging

app = typer.Typer(
    name="bumpscope",
    help="Baseline tags, scoped commits and release rules for semantic version bumps",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bumpscope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show warnings and errors"),
    json_log: bool = typer.Option(False, "--json-log", help="Log as JSON lines on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet, json_log=json_log)


@app.command()
def rules(
    path: Optional[str] = typer.Argument(None, help="Project directory"),
    custom: Optional[str] = typer.Option(
        None,
        "--custom",
        "-c",
        help="Custom rules, e.g. 'build:patch,chore:minor:Chores' (overrides config)",
    ),
    output_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Show the merged release rules."""
    run_rules(path, custom, output_json, console, err_console)


@app.command()
def plan(
    path: Optional[str] = typer.Argument(None, help="Project directory"),
    head: str = typer.Option("HEAD", "--head", help="Ref being released"),
    scope: Optional[list[str]] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Only include commits with this scope (repeatable)",
    ),
    prerelease: Optional[str] = typer.Option(
        None,
        "--prerelease",
        "-p",
        help="Prerelease identifier, e.g. 'beta' or 'rc'",
    ),
    fetch_all: bool = typer.Option(False, "--fetch-all", help="Read every tag"),
    output_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Show baseline tags, commits and rules for the next release."""
    run_plan(path, head, scope or [], prerelease, fetch_all, output_json, console, err_console)


if __name__ == "__main__":
    app()
