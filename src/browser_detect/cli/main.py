"""browser-detect CLI - Main entry point."""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.markup import escape

from browser_detect import __version__
from browser_detect.conditions.parser import InvalidCondition
from browser_detect.config.logging import configure_logging
from browser_detect.config.settings import get_settings

from .helpers import classification_table, console, flags_table, get_browser

app = typer.Typer(
    name="browser-detect",
    help="Classify user agents and evaluate browser conditions",
    add_completion=False,
)

# Exit code for a malformed condition; 1 is reserved for "no match"
EXIT_INVALID_CONDITION = 2


@app.command()
def classify(
    user_agent: Optional[str] = typer.Argument(
        None,
        help="User agent to inspect (defaults to $HTTP_USER_AGENT)",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json", "-j",
        help="Output classification as JSON",
    ),
):
    """Classify a user agent into family, version and OS."""
    browser = get_browser(user_agent)
    ua = browser.user_agent
    result = browser.classify()

    if json_output:
        console.print_json(json.dumps({"user_agent": ua, **result.to_dict()}))
        return

    console.print(classification_table(ua, result))


@app.command()
def match(
    condition: str = typer.Argument(
        ...,
        help='Condition such as "ie lt 7" or "not opera"',
    ),
    user_agent: Optional[str] = typer.Argument(
        None,
        help="User agent to inspect (defaults to $HTTP_USER_AGENT)",
        show_default=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Only set the exit code",
    ),
):
    """Evaluate a browser condition. Exits 0 on match, 1 otherwise."""
    browser = get_browser(user_agent)
    try:
        matched = browser.matches(condition)
    except InvalidCondition as e:
        console.print(f"[red]Invalid condition:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_INVALID_CONDITION)

    if not quiet:
        console.print("[green]true[/green]" if matched else "[yellow]false[/yellow]")
    raise typer.Exit(0 if matched else 1)


@app.command()
def flags(
    user_agent: Optional[str] = typer.Argument(
        None,
        help="User agent to inspect (defaults to $HTTP_USER_AGENT)",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json", "-j",
        help="Output predicate results as JSON",
    ),
):
    """Show every browser predicate for a user agent."""
    results = get_browser(user_agent).flags()
    if json_output:
        console.print_json(json.dumps(results))
        return
    console.print(flags_table(results))


@app.command()
def version():
    """Show browser-detect version."""
    console.print(f"[bold]browser-detect[/bold] v{__version__}")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override BROWSER_DETECT_LOG_LEVEL"
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="Override BROWSER_DETECT_LOG_FORMAT (text/json)"
    ),
):
    """
    browser-detect - Pretty-print browsers and match browser conditions.

    Run 'browser-detect --help' for available commands.
    """
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        format=log_format or settings.log_format,
    )


if __name__ == "__main__":
    app()
