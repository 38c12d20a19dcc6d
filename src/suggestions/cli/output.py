"""
CLI Output Utilities

Renders suggestion reports as plain text or JSON. Data goes to stdout via
typer.echo; errors go to stderr through a rich console.
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from suggestions.cli.config import CLIConfig
from suggestions.schemas import SuggestionReport, SuggestionResult

# Console instance for rich error output
_err_console = Console(stderr=True, highlight=False)


def quote(value: str) -> str:
    """
    Quote a value for display, escaping quotes, backslashes, control and
    non-ASCII characters the same way a JSON string does.
    """
    return json.dumps(value)


def render_line(result: SuggestionResult, config: CLIConfig) -> str:
    """Space-separated suggestions for a single target."""
    values = result.suggestions
    if config.quote_values:
        values = [quote(value) for value in values]
    return " ".join(values)


def render_text(report: SuggestionReport, config: CLIConfig) -> str:
    """One line per target, in command-line order."""
    return "\n".join(render_line(result, config) for result in report.results)


def render_json(report: SuggestionReport) -> str:
    """A JSON object mapping each target to its list of suggestions."""
    return json.dumps(report.as_mapping(), indent=2)


def print_report(report: SuggestionReport, config: CLIConfig) -> None:
    """Write the report to stdout in the configured format."""
    if config.json_output:
        typer.echo(render_json(report))
    else:
        typer.echo(render_text(report, config))


def print_error(message: str, suggest: Optional[List[str]] = None) -> None:
    """
    Print an error message to stderr.

    Args:
        message: Error message
        suggest: Alternatives to offer the user, best last
    """
    _err_console.print(f"[red]Error:[/red] {escape(message)}")
    if suggest:
        listed = ", ".join(escape(value) for value in suggest)
        _err_console.print(f"[dim]Did you mean: {listed}?[/dim]")
