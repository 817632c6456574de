"""CLI interface for xclint using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from xclint import __description__, __version__
from xclint.config import LogLevel, OutputFormat, load_config
from xclint.linting import (
    FileSystemOracle,
    LintingStatus,
    LintingSummary,
    TargetLinter,
)
from xclint.loader import load_target

app = typer.Typer(
    name="xclint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"xclint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """xclint - Target linter for Xcode project generation."""


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("xclint").setLevel(LOG_LEVELS[LogLevel(level)])


def _output_table(target_name: str, summary: LintingSummary) -> None:
    status_color = {
        LintingStatus.PASS: "green",
        LintingStatus.WARN: "yellow",
        LintingStatus.FAIL: "red",
    }[summary.status]
    console.print(f"[{status_color}]Lint Status: {summary.status.value.upper()}[/{status_color}]")
    console.print(f"Target: {escape(target_name)}")

    if not summary.warnings and not summary.errors:
        console.print("[green]No issues found[/green]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Severity")
    table.add_column("Reason")
    for issue in summary.warnings:
        table.add_row("[yellow]WARNING[/yellow]", escape(issue.reason))
    for issue in summary.errors:
        table.add_row("[red]ERROR[/red]", escape(issue.reason))
    console.print(table)


def _output_markdown(target_name: str, summary: LintingSummary) -> None:
    console.print("# Lint Report", markup=False)
    console.print(f"**Target:** {target_name}", markup=False)
    console.print(f"**Status:** {summary.status.value}", markup=False)
    console.print(f"**Exit Code:** {summary.exit_code}", markup=False)

    if summary.warnings:
        console.print()
        console.print("## Warnings", markup=False)
        for issue in summary.warnings:
            console.print(f"- {issue.reason}", markup=False)

    if summary.errors:
        console.print()
        console.print("## Errors", markup=False)
        for issue in summary.errors:
            console.print(f"- {issue.reason}", markup=False)


@app.command()
def lint(
    target_file: Annotated[
        Path,
        typer.Argument(help="Path to the target description JSON file")
    ],
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .xclint.json)")
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with a failure code when warnings are found")
    ] = False,
) -> None:
    """Lint a target description before project generation."""
    valid_formats = [f.value for f in OutputFormat]

    if format is not None and format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(2)

    try:
        xclint_config = load_config(config)
        target_file = target_file.resolve()
        target = load_target(target_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    _configure_logging(xclint_config.logging.level)

    # Relative paths in the description are relative to the description file
    oracle = FileSystemOracle(root=target_file.parent)
    issues = TargetLinter().lint(target, oracle)

    summary = LintingSummary.from_issues(
        issues,
        fail_on_warnings=strict or xclint_config.reporting.fail_on_warnings,
    )

    output_format = format or xclint_config.output.format
    if output_format == OutputFormat.JSON.value:
        typer.echo(jsonlib.dumps({"target": target.name, **summary.to_dict()}, indent=2))
    elif output_format == OutputFormat.MARKDOWN.value:
        _output_markdown(target.name, summary)
    else:
        _output_table(target.name, summary)

    if summary.exit_code != 0:
        raise typer.Exit(summary.exit_code)


if __name__ == "__main__":
    app()
