# dhpii_client/cli/main.py

import os
import typer
from typing import Optional

from .commands import detect, anonymize, info
from .commands import config as config_cmd
from ..config.settings import Config
from ..utils.logging import setup_logging

app = typer.Typer(
    name="dhpii",
    help="Console for the DHPII PII/PHI detection and anonymization API",
    add_completion=False
)

# Add command groups
app.add_typer(detect.app, name="detect", help="Detect PII/PHI in text or images")
app.add_typer(anonymize.app, name="anonymize", help="Anonymize PII/PHI in text or images")
app.add_typer(config_cmd.app, name="config", help="View or change settings")

# Add direct info commands at root level
app.command(name="languages")(info.show_languages)
app.command(name="health")(info.show_health)
app.command(name="entities")(info.show_entities)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Enable verbose output with debug logging"
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Override the API base URL for this invocation"
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Override the API key for this invocation"
    ),
):
    """
    DHPII Console - detect and anonymize PII/PHI through the DHPII API
    """
    # Overrides travel through the environment so every command's Config sees them
    if base_url:
        os.environ[Config.ENV_BASE_URL] = base_url
    if api_key:
        os.environ[Config.ENV_API_KEY] = api_key

    # Initialize logging globally
    config = Config()
    setup_logging(config.config_dir, debug=verbose)


def main():
    app()


if __name__ == "__main__":
    main()
