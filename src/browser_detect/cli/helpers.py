"""Shared helpers for CLI modules: console, browser resolution, rendering."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from browser_detect.browser import Browser
from browser_detect.config.settings import get_settings
from browser_detect.detection.classifier import Classification
from browser_detect.environment import source_from_settings

console = Console()


def get_browser(user_agent: Optional[str] = None) -> Browser:
    """Browser for an explicit user agent, else the configured environment."""
    if user_agent is not None:
        return Browser.for_user_agent(user_agent)
    return Browser(source_from_settings(get_settings()))


def classification_table(user_agent: str, result: Classification) -> Table:
    table = Table(title="Browser", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("User agent", escape(user_agent) or "[dim](empty)[/dim]")
    table.add_row("Family", result.family.label or "[dim]unknown[/dim]")
    table.add_row("Version", result.version or "[dim]-[/dim]")
    table.add_row("OS", result.os.value)
    table.add_row("Display", result.display_name)
    return table


def flags_table(flags: dict[str, bool]) -> Table:
    table = Table(title="Predicates")
    table.add_column("Predicate", style="cyan")
    table.add_column("Result", justify="center")
    for name, value in flags.items():
        table.add_row(name, "[green]yes[/green]" if value else "[dim]no[/dim]")
    return table
