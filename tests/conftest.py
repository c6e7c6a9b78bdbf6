"""Pytest configuration and fixtures for httpie-lite tests."""

from __future__ import annotations

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import ResponseView
from core.parsing import parse_media_type


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from the developer's environment and .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_transport(recorded_requests: list[httpx.Request]):
    """Build an `httpx.MockTransport` that records requests and replies with a fixed response."""

    def _create(
        status: int = 200,
        body: str | bytes = "",
        headers: list[tuple[str, str]] | None = None,
        error: Exception | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status, content=body, headers=headers or [])

        return httpx.MockTransport(handler)

    return _create


@pytest.fixture
def make_view():
    """Create a `ResponseView` without going through the network."""

    def _create(
        body: str = "",
        content_type: str | None = None,
        status_code: int = 200,
        reason_phrase: str = "OK",
        headers: list[tuple[str, str]] | None = None,
    ) -> ResponseView:
        all_headers = list(headers or [])
        if content_type is not None:
            all_headers.insert(0, ("content-type", content_type))
        return ResponseView(
            http_version="HTTP/1.1",
            status_code=status_code,
            reason_phrase=reason_phrase,
            headers=tuple(all_headers),
            body=body,
            content_type=parse_media_type(content_type),
        )

    return _create
