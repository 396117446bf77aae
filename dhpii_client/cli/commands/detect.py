# dhpii_client/cli/commands/detect.py

import typer
import requests
from pathlib import Path
from typing import Optional, List
from rich.console import Console

from ..context import ClientContext, fail, resolve_text, validate_image, normalize_entities
from ..render import print_entities, print_statistics, print_session
from ...client import error_message, TextDetectionRequest
from ...utils import get_logger

app = typer.Typer()
console = Console()
logger = get_logger('cli.detect')


@app.command(name="text")
def detect_text(
    text: Optional[str] = typer.Argument(None, help="Text to analyze"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a file"),
    sample: bool = typer.Option(False, "--sample", help="Use the built-in sample text"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (default from config)"),
    entities: Optional[List[str]] = typer.Option(None, "--entity", "-e", help="Entity type to detect (repeatable)"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", min=0.0, max=1.0, help="Confidence threshold (0-1)"),
    allow: Optional[List[str]] = typer.Option(None, "--allow", help="Value never reported as PII (repeatable)"),
):
    """Detect PII/PHI in text"""
    ctx = ClientContext()
    defaults = ctx.defaults

    text = resolve_text(console, text, file, sample, "Please enter some text to analyze")

    request = TextDetectionRequest(
        text=text,
        language=language or defaults['language'],
        entities=normalize_entities(entities),
        confidence_threshold=threshold if threshold is not None else defaults['confidence_threshold'],
        allow_list=allow or None
    )

    try:
        response = ctx.client.detect_text(request)
    except requests.RequestException as e:
        logger.warning(f"Text detection failed: {e}")
        fail(console, f"Detection failed: {error_message(e, 'Detection failed')}")

    console.print(
        f"[green]✓[/green] Detection complete: found {len(response.results)} "
        f"potential PII/PHI entities"
    )
    if response.language_used:
        console.print(f"[dim]Language: {response.language_used}[/dim]")
    console.print()

    print_entities(console, response.results)
    print_statistics(console, response.statistics)
    print_session(console, response.session_id)


@app.command(name="image")
def detect_image(
    image: Path = typer.Argument(..., help="Image file (jpeg, png, gif, bmp, tiff; max 10MB)"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (default from config)"),
    entities: Optional[List[str]] = typer.Option(None, "--entity", "-e", help="Entity type to detect (repeatable)"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", min=0.0, max=1.0, help="Confidence threshold (0-1)"),
):
    """Detect PII/PHI in an image"""
    ctx = ClientContext()
    defaults = ctx.defaults

    validate_image(console, image)
    console.print(f"Analyzing [bold]{image.name}[/bold]...")

    try:
        response = ctx.client.detect_image(
            image,
            language=language or defaults['language'],
            entities=normalize_entities(entities),
            confidence_threshold=threshold if threshold is not None else defaults['confidence_threshold']
        )
    except requests.RequestException as e:
        logger.warning(f"Image detection failed for {image}: {e}")
        fail(console, f"Detection failed: {error_message(e, 'Detection failed')}")

    console.print(
        f"[green]✓[/green] Detection complete: found {len(response.results)} "
        f"potential PII/PHI entities\n"
    )

    print_entities(console, response.results)
    print_statistics(console, response.statistics)
    print_session(console, response.session_id)
