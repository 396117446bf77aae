# dhpii_client/cli/commands/info.py

import typer
import requests
from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..context import ClientContext, fail
from ..render import language_region
from ...client import error_message
from ...client.models import (
    COMMON_ENTITIES,
    ANONYMIZATION_TYPES,
    IMAGE_ANONYMIZATION_TYPES,
    DEFAULT_LANGUAGES,
)
from ...utils import get_logger

console = Console()
logger = get_logger('cli.info')

REGION_STYLES = {
    'Primary': 'bold blue',
    'Extended': 'magenta',
    'Regional': 'dim',
}


def show_languages(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by code or name"),
):
    """List languages supported by the API"""
    ctx = ClientContext()

    try:
        languages = ctx.client.get_supported_languages()
    except requests.RequestException as e:
        logger.warning(f"Failed to load languages from API, using built-in list: {e}")
        console.print(
            "[yellow]⚠[/yellow]  Using cached language data. "
            "API connection may be unavailable."
        )
        console.print(f"[dim]{escape(error_message(e, 'Failed to load languages'))}[/dim]\n")
        languages = DEFAULT_LANGUAGES

    if search:
        term = search.lower()
        languages = {
            code: name for code, name in languages.items()
            if term in code.lower() or term in str(name).lower()
        }

    if not languages:
        console.print("[yellow]No languages match your search[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Code", style="cyan")
    table.add_column("Language")
    table.add_column("Support")

    for code, name in sorted(languages.items(), key=lambda item: str(item[1])):
        region = language_region(code)
        style = REGION_STYLES[region]
        table.add_row(escape(code), escape(str(name)), f"[{style}]{region}[/{style}]")

    console.print(table)
    console.print(f"\n[dim]{len(languages)} language(s)[/dim]")


def show_health():
    """Check whether the API is up"""
    ctx = ClientContext()
    base_url = ctx.client.base_url

    console.print(f"\n[bold]DHPII API - System Health[/bold]")
    console.print(f"[dim]{'─' * 60}[/dim]")
    console.print(f"  Endpoint: {base_url}")

    try:
        health = ctx.client.health_check()
    except requests.RequestException as e:
        logger.warning(f"Health check against {base_url} failed: {e}")
        console.print(f"  Status: [red]ERROR[/red]")
        fail(console, error_message(e, 'Health check failed'))

    status = health.status.lower()
    if status in ('healthy', 'ok', 'up', 'running'):
        console.print(f"  Status: [green]{health.status.upper()}[/green]")
    elif status in ('degraded', 'warning'):
        console.print(f"  Status: [yellow]{health.status.upper()}[/yellow]")
    else:
        console.print(f"  Status: [red]{health.status.upper()}[/red]")

    extra = health.model_extra or {}
    for key, value in extra.items():
        console.print(f"  {key.replace('_', ' ').title()}: {escape(str(value))}")

    console.print()


def show_entities():
    """List common entity types and anonymization methods"""
    console.print("\n[bold]Common entity types:[/bold]")
    for entity in COMMON_ENTITIES:
        console.print(f"  {entity}")

    table = Table(show_header=True, header_style="bold magenta", box=None)
    table.add_column("Method", style="cyan")
    table.add_column("Description")
    table.add_column("Applies to")

    for value, label in ANONYMIZATION_TYPES.items():
        target = "text, image" if value in IMAGE_ANONYMIZATION_TYPES else "text"
        table.add_row(value, label, target)
    for value, label in IMAGE_ANONYMIZATION_TYPES.items():
        if value not in ANONYMIZATION_TYPES:
            table.add_row(value, label, "image")

    console.print("\n[bold]Anonymization methods:[/bold]")
    console.print(table)
    console.print()
