# dhpii_client/cli/commands/config.py

import typer
from typing import Optional
from rich.console import Console

from ..context import ClientContext, fail

app = typer.Typer()
console = Console()


def _mask(api_key: str) -> str:
    if len(api_key) <= 4:
        return "*" * len(api_key)
    return f"{api_key[:2]}{'*' * (len(api_key) - 4)}{api_key[-2:]}"


@app.command()
def show():
    """Show the effective configuration"""
    ctx = ClientContext()
    settings = ctx.config.get_api_settings()
    defaults = ctx.defaults

    console.print("\n[bold]Configuration:[/bold]")
    console.print(f"  Config file: {ctx.config.global_config_path}")
    console.print(f"  Base URL: {settings['base_url']}")
    console.print(f"  API key: {_mask(settings['api_key'])}")
    console.print(f"  Default language: {defaults['language']}")
    console.print(f"  Default confidence threshold: {defaults['confidence_threshold']}")
    console.print()


@app.command(name="set")
def set_config(
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API root URL"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API key sent as x-api-key"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Default language code"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", min=0.0, max=1.0, help="Default confidence threshold"),
):
    """Update the configuration file"""
    if base_url is None and api_key is None and language is None and threshold is None:
        fail(console, "Nothing to set. Pass --base-url, --api-key, --language or --threshold")

    ctx = ClientContext()
    ctx.config.set_api_settings(base_url=base_url, api_key=api_key)
    ctx.config.set_request_defaults(language=language, confidence_threshold=threshold)

    console.print(f"[green]✓[/green] Configuration saved to {ctx.config.global_config_path}")
