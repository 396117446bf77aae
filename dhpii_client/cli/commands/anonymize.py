# dhpii_client/cli/commands/anonymize.py

import typer
import requests
from pathlib import Path
from typing import Optional, List
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..context import ClientContext, fail, resolve_text, validate_image, normalize_entities
from ..render import print_entities, print_statistics, print_session
from ...client import error_message, TextAnonymizationRequest
from ...client.models import ANONYMIZATION_TYPES, IMAGE_ANONYMIZATION_TYPES, FILL_COLORS
from ...utils import get_logger

app = typer.Typer()
console = Console()
logger = get_logger('cli.anonymize')


def _check_choice(value: str, choices, label: str):
    if value not in choices:
        fail(console, f"Unknown {label} '{value}'. Choose from: {', '.join(choices)}")


@app.command(name="text")
def anonymize_text(
    text: Optional[str] = typer.Argument(None, help="Text to anonymize"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a file"),
    sample: bool = typer.Option(False, "--sample", help="Use the built-in sample text"),
    anonymization_type: str = typer.Option("mask", "--type", "-a", help="mask, replace, redaction, hash, pseudonymize or encrypt"),
    entities: Optional[List[str]] = typer.Option(None, "--entity", "-e", help="Entity type to anonymize (repeatable)"),
    mask_char: str = typer.Option("*", "--mask-char", help="Character used by the mask method"),
    show_original: bool = typer.Option(False, "--show-original", help="Also print the original text"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the anonymized text to a file"),
):
    """Anonymize PII/PHI in text"""
    _check_choice(anonymization_type, ANONYMIZATION_TYPES, "anonymization type")

    ctx = ClientContext()
    text = resolve_text(console, text, file, sample, "Please enter some text to anonymize")

    request = TextAnonymizationRequest(
        text=text,
        anonymization_type=anonymization_type,
        entities=normalize_entities(entities),
        config={'mask_char': mask_char}
    )

    try:
        response = ctx.client.anonymize_text(request)
    except requests.RequestException as e:
        logger.warning(f"Text anonymization failed: {e}")
        fail(console, f"Anonymization failed: {error_message(e, 'Anonymization failed')}")

    console.print(
        f"[green]✓[/green] Anonymized {len(response.anonymized_entities)} entities "
        f"using {ANONYMIZATION_TYPES[anonymization_type]}\n"
    )

    if show_original:
        console.print(Panel(escape(text), title="Original", border_style="dim", padding=(1, 2)))

    console.print(Panel(
        escape(response.anonymized_text),
        title="Anonymized",
        border_style="green",
        padding=(1, 2)
    ))

    if output:
        try:
            output.write_text(response.anonymized_text, encoding='utf-8')
        except OSError as e:
            fail(console, f"Cannot write {output}: {e}")
        console.print(f"[green]✓[/green] Saved anonymized text to {output}")

    print_entities(console, response.anonymized_entities, title="Anonymized Entities")
    print_statistics(console, response.statistics)
    print_session(console, response.session_id)


@app.command(name="image")
def anonymize_image(
    image: Path = typer.Argument(..., help="Image file (jpeg, png, gif, bmp, tiff; max 10MB)"),
    anonymization_type: str = typer.Option("redaction", "--type", "-a", help="redaction, blur or pixelation"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (default from config)"),
    entities: Optional[List[str]] = typer.Option(None, "--entity", "-e", help="Entity type to anonymize (repeatable)"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", min=0.0, max=1.0, help="Confidence threshold (0-1)"),
    fill: str = typer.Option("black", "--fill", help="Fill colour: black, white, gray or red"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the anonymized image here"),
):
    """Anonymize PII/PHI in an image"""
    _check_choice(anonymization_type, IMAGE_ANONYMIZATION_TYPES, "anonymization type")
    _check_choice(fill, FILL_COLORS, "fill colour")

    ctx = ClientContext()
    defaults = ctx.defaults

    validate_image(console, image)
    console.print(f"Anonymizing [bold]{image.name}[/bold]...")

    try:
        response = ctx.client.anonymize_image(
            image,
            anonymization_type=anonymization_type,
            language=language or defaults['language'],
            entities=normalize_entities(entities),
            confidence_threshold=threshold if threshold is not None else defaults['confidence_threshold'],
            fill=fill
        )
    except requests.RequestException as e:
        logger.warning(f"Image anonymization failed for {image}: {e}")
        fail(console, f"Anonymization failed: {error_message(e, 'Anonymization failed')}")

    console.print(
        f"[green]✓[/green] Anonymized {len(response.anonymized_entities)} entities in image\n"
    )

    print_entities(console, response.anonymized_entities, title="Anonymized Entities")
    print_statistics(console, response.statistics)

    if response.anonymized_image_id:
        console.print(f"[dim]Image ID: {response.anonymized_image_id}[/dim]")
    print_session(console, response.session_id)

    if output is None:
        return

    if not response.anonymized_image_url:
        fail(console, "The API did not return an anonymized image URL")

    if output.is_dir():
        output = output / f"anonymized_{response.anonymized_image_id or image.stem}.png"

    try:
        content = ctx.client.download_image(response.anonymized_image_url)
    except requests.RequestException as e:
        logger.warning(f"Download of {response.anonymized_image_url} failed: {e}")
        fail(console, f"Download failed: {error_message(e, 'Download failed')}")

    try:
        output.write_bytes(content)
    except OSError as e:
        fail(console, f"Cannot write {output}: {e}")
    console.print(f"[green]✓[/green] Saved anonymized image to {output}")
