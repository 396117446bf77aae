# dhpii_client/cli/render.py

from typing import Dict, Any, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..client.models import DetectedEntity

PRIMARY_LANGUAGES = {'en', 'es', 'fr', 'de', 'it', 'pt', 'nl', 'ru'}
EXTENDED_LANGUAGES = {'zh', 'ja', 'ko', 'ar', 'he'}


def confidence_style(confidence: float) -> str:
    """Badge colour for a confidence score"""
    if confidence >= 0.8:
        return "green"
    if confidence >= 0.6:
        return "yellow"
    return "red"


def confidence_badge(confidence: float) -> str:
    style = confidence_style(confidence)
    icon = "✓" if style == "green" else "⚠"
    return f"[{style}]{icon} {confidence * 100:.1f}%[/{style}]"


def language_region(code: str) -> str:
    """Primary, Extended or Regional support tier for a language code"""
    if code in PRIMARY_LANGUAGES:
        return "Primary"
    if code in EXTENDED_LANGUAGES:
        return "Extended"
    return "Regional"


def entity_table(entities: List[DetectedEntity], title: str = "Detected Entities") -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Text")
    table.add_column("Position", style="dim")
    table.add_column("Confidence", justify="right")

    for i, entity in enumerate(entities, 1):
        table.add_row(
            str(i),
            entity.entity_type,
            escape(entity.text),
            f"{entity.start}-{entity.end}",
            confidence_badge(entity.confidence)
        )

    return table


def print_entities(console: Console, entities: List[DetectedEntity], title: str = "Detected Entities"):
    if not entities:
        console.print("[yellow]No PII/PHI entities found[/yellow]")
        return
    console.print(entity_table(entities, title))


def print_statistics(console: Console, statistics: Dict[str, Any]):
    """Statistics are free-form; show scalars as rows and nested values compactly"""
    if not statistics:
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    for key, value in statistics.items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}: {v}" for k, v in value.items()) or "-"
        elif isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "-"
        table.add_row(str(key).replace('_', ' ').title(), escape(str(value)))

    console.print("\n[bold]Statistics:[/bold]")
    console.print(table)


def print_session(console: Console, session_id: str):
    if session_id:
        console.print(f"[dim]Session ID: {session_id}[/dim]")
