from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from repo_search.config import Settings
from repo_search.datasources.github_adapter import GitHubAdapter


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for name in ("GITHUB_BASE_URL", "GITHUB_PROXY", "GITHUB_TIMEOUT_SECONDS", "GITHUB_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_adapter(settings, requests_seen) -> Callable[..., GitHubAdapter]:
    """Build an adapter whose HTTP traffic is answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubAdapter:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return GitHubAdapter(settings=settings, transport=httpx.MockTransport(_record))

    return _make


def json_response(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    body = json.dumps(payload)
    return lambda request: httpx.Response(
        status_code, content=body, headers={"Content-Type": "application/json"}
    )
