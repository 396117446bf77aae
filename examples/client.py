# examples/client.py
"""
DHPII Client - Example Walkthrough

Runs every API call once against a live DHPII API and prints the results.
It can be used as both a smoke test and as reference documentation.

Prerequisites:
    1. Start the DHPII API (default http://localhost:8000)
    2. pip install -e .
    3. Run this script: python examples/client.py

Usage:
    python examples/client.py [--base-url URL] [--api-key KEY] [--image PATH]
"""

import sys
from pathlib import Path
from typing import Optional

import requests

from dhpii_client import DHPIIClient, error_message
from dhpii_client.client import TextDetectionRequest, TextAnonymizationRequest
from dhpii_client.client.models import SAMPLE_TEXT


def run_example(client: DHPIIClient, image: Optional[Path] = None) -> bool:
    """Walk through the API; returns False if the API is not reachable."""
    print("=" * 60)
    print("DHPII Client - Example Walkthrough")
    print("=" * 60)

    # -------------------------------------------------------------------------
    # 1. Health
    # -------------------------------------------------------------------------
    print("\n[1] Checking API health...")

    try:
        health = client.health_check()
    except requests.RequestException as e:
        print(f"✗ API not reachable at {client.base_url}: {error_message(e, 'Health check failed')}")
        return False
    print(f"✓ Status: {health.status}")

    # -------------------------------------------------------------------------
    # 2. Languages
    # -------------------------------------------------------------------------
    print("\n[2] Supported languages...")

    languages = client.get_supported_languages()
    preview = ", ".join(f"{code} ({name})" for code, name in list(languages.items())[:5])
    print(f"✓ {len(languages)} language(s): {preview}...")

    # -------------------------------------------------------------------------
    # 3. Text detection
    # -------------------------------------------------------------------------
    print("\n[3] Detecting PII in sample text...")

    detection = client.detect_text(TextDetectionRequest(text=SAMPLE_TEXT, language="en"))
    print(f"✓ Found {len(detection.results)} entities (session {detection.session_id})")
    for entity in detection.results:
        print(f"  {entity.entity_type:<15} {entity.text!r:<30} {entity.confidence:.2f}")

    # -------------------------------------------------------------------------
    # 4. Text anonymization
    # -------------------------------------------------------------------------
    print("\n[4] Masking sample text...")

    anonymized = client.anonymize_text(TextAnonymizationRequest(
        text=SAMPLE_TEXT,
        anonymization_type="mask",
        config={"mask_char": "*"}
    ))
    print(f"✓ Anonymized {len(anonymized.anonymized_entities)} entities:\n")
    print(anonymized.anonymized_text)

    # -------------------------------------------------------------------------
    # 5. Image (optional)
    # -------------------------------------------------------------------------
    if image:
        print(f"\n[5] Redacting {image.name}...")

        try:
            result = client.anonymize_image(image, anonymization_type="redaction")
            output = image.with_name(f"anonymized_{result.anonymized_image_id}.png")
            output.write_bytes(client.download_image(result.anonymized_image_url))
            print(f"✓ Redacted {len(result.anonymized_entities)} regions, saved {output}")
        except requests.RequestException as e:
            print(f"⚠ Image anonymization failed: {error_message(e)}")

    print("\n" + "=" * 60)
    print("✓ Example completed successfully!")
    print("=" * 60)

    return True


def main():
    """Main entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="DHPII Client Example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Run with default settings
    python examples/client.py

    # Connect to a remote API and redact an image too
    python examples/client.py --base-url https://pii.example.com --image scan.png
        """
    )

    parser.add_argument(
        '--base-url',
        default='http://localhost:8000',
        help='API base URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--api-key',
        default='dhpii-api-key',
        help='API key sent as x-api-key'
    )
    parser.add_argument(
        '--image',
        type=Path,
        default=None,
        help='Optional image to redact'
    )

    args = parser.parse_args()

    client = DHPIIClient(base_url=args.base_url, api_key=args.api_key)
    success = run_example(client, image=args.image)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
