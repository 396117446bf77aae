# dhpii_client/cli/context.py

from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..client import DHPIIClient
from ..client.models import SAMPLE_TEXT
from ..utils.logging import get_logger

logger = get_logger('cli.context')

# Accepted by the image commands, mirroring the upload widget limits
IMAGE_EXTENSIONS = {'.jpeg', '.jpg', '.png', '.gif', '.bmp', '.tiff'}
MAX_IMAGE_BYTES = 10 * 1024 * 1024


class ClientContext:
    """
    Resolves configuration and hands out a ready DHPIIClient.

    Each command builds its own context; nothing is shared between calls.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self.config = Config(config_dir)
        self._client: Optional[DHPIIClient] = None

    @property
    def client(self) -> DHPIIClient:
        """Client for the configured API, created on first use"""
        if self._client is None:
            settings = self.config.get_api_settings()
            logger.debug(f"Creating client for {settings['base_url']}")
            self._client = DHPIIClient(
                base_url=settings['base_url'],
                api_key=settings['api_key']
            )
        return self._client

    @property
    def defaults(self) -> dict:
        return self.config.get_request_defaults()


def fail(console: Console, message: str):
    """Print an error line and exit with status 1"""
    console.print(f"[red]✗[/red] {escape(message)}", style="bold")
    raise typer.Exit(1)


def resolve_text(
    console: Console,
    text: Optional[str],
    file: Optional[Path],
    sample: bool,
    empty_message: str
) -> str:
    """Pick the input text from the argument, a file or the built-in sample"""
    if sample:
        return SAMPLE_TEXT

    if file is not None:
        try:
            text = file.read_text(encoding='utf-8')
        except OSError as e:
            fail(console, f"Cannot read {file}: {e}")

    if not text or not text.strip():
        fail(console, empty_message)

    return text


def validate_image(console: Console, path: Path) -> Path:
    """Reject files the API would not accept before uploading them"""
    if not path.is_file():
        fail(console, f"Image not found: {path}")

    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        allowed = ", ".join(sorted(IMAGE_EXTENSIONS))
        fail(console, f"Unsupported image type '{path.suffix}'. Allowed: {allowed}")

    if path.stat().st_size > MAX_IMAGE_BYTES:
        fail(console, f"Image is larger than {MAX_IMAGE_BYTES // (1024 * 1024)}MB: {path}")

    return path


def normalize_entities(entities: Optional[List[str]]) -> Optional[List[str]]:
    """Upper-case entity filters; an empty selection means no filter"""
    if not entities:
        return None
    return [e.strip().upper() for e in entities if e.strip()] or None
