"""
Shared test fixtures and configuration.
"""

import json
from typing import Dict, List, Optional, Tuple

import pytest

from dxsh.analyzers.github_analyzer import GitHubReleaseResolver
from dxsh.config.settings import GitHubConfig, Settings
from dxsh.core.generator import ScriptGenerator
from dxsh.models.release import HttpResponse


class FakeTransport:
    """Returns a canned response and records every request."""

    def __init__(self, response: Optional[HttpResponse] = None,
                 error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        self.calls.append((url, headers))
        if self.error is not None:
            raise self.error
        return self.response


def json_response(data, status: int = 200, reason: str = "OK",
                  headers: Optional[Dict[str, str]] = None) -> HttpResponse:
    return HttpResponse(
        status=status,
        reason=reason,
        headers=headers or {},
        body=json.dumps(data).encode("utf-8")
    )


@pytest.fixture(autouse=True)
def no_github_token(monkeypatch):
    """Keep a developer's GITHUB_TOKEN out of request headers."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def release_data() -> dict:
    return {
        "tag_name": "v1.0.0",
        "name": "Release 1.0.0",
        "assets": [
            {
                "name": "docker-compose-linux-x86_64",
                "browser_download_url": "https://example.com/docker-compose-linux-x86_64",
                "size": 1024
            },
            {
                "name": "docker-compose-darwin-aarch64",
                "browser_download_url": "https://example.com/docker-compose-darwin-aarch64",
                "size": 2048
            }
        ]
    }


@pytest.fixture
def make_generator():
    """Build a generator whose resolver talks to a FakeTransport."""
    def _make(transport: FakeTransport) -> ScriptGenerator:
        resolver = GitHubReleaseResolver(config=GitHubConfig(), transport=transport)
        return ScriptGenerator(resolver=resolver, settings=Settings())
    return _make
