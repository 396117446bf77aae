"""Shared fixtures: isolated config directory and a fake HTTP layer."""

import json
from typing import Any, Callable, List, Optional, Union
from unittest.mock import MagicMock

import pytest
import requests

from dhpii_client.client import DHPIIClient
from dhpii_client.config import Config

BASE_URL = "http://dhpii.test"
API_KEY = "test-key"

_REASONS = {200: "OK", 400: "Bad Request", 401: "Unauthorized", 404: "Not Found",
            422: "Unprocessable Entity", 500: "Internal Server Error"}


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    content: Optional[bytes] = None,
    url: str = BASE_URL,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = _REASONS.get(status_code, "")
    response.url = url
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = content if content is not None else b""
    return response


class RecordingTransport:
    """Stands in for requests.Session.request and records every call."""

    def __init__(self):
        self.calls: List[dict] = []
        self._replies: List[Union[requests.Response, Exception, Callable]] = []

    def reply(self, *replies):
        self._replies.extend(replies)
        return self

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._replies:
            raise AssertionError(f"Unexpected request: {method} {url}")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(method, url, **kwargs)
        return reply


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Point the config layer at a temp dir and clear env overrides."""
    config_dir = tmp_path / ".dhpii"
    monkeypatch.setattr(Config, "DEFAULT_CONFIG_DIR", config_dir)
    # setenv records the original state so overrides written by the CLI are undone
    monkeypatch.setenv(Config.ENV_BASE_URL, "")
    monkeypatch.setenv(Config.ENV_API_KEY, "")
    return Config(config_dir)


@pytest.fixture
def session() -> MagicMock:
    fake = MagicMock()
    fake.headers = {}
    return fake


@pytest.fixture
def client(session) -> DHPIIClient:
    return DHPIIClient(base_url=BASE_URL, api_key=API_KEY, session=session)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> RecordingTransport:
    """Patch every requests.Session so CLI commands hit the recorder."""
    recorder = RecordingTransport()
    monkeypatch.setattr(requests.Session, "request", recorder)
    return recorder


@pytest.fixture
def sample_entities() -> list:
    return [
        {"entity_type": "PERSON", "text": "John Doe", "start": 0, "end": 8, "confidence": 0.85},
        {"entity_type": "US_SSN", "text": "123-45-6789", "start": 14, "end": 25, "confidence": 0.65},
    ]
