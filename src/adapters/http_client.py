"""httpx wrapper: client construction and request execution.

Why a wrapper:
- Default headers, redirects and timeout policy are set in a single place.
- Tests swap the network for an `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
import time
from typing import Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import NetworkError
from core.domain.models import GetRequest, PostRequest, RequestDescriptor, ResponseView
from core.parsing import parse_media_type

_LOGGER = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the default header set attached.

    `headers` defaults to `settings.default_headers()`; it is applied once here
    and reused for every request the client sends.
    """

    settings = settings or AppSettings()
    if headers is None:
        headers = settings.default_headers()

    options: dict[str, object] = {
        "headers": dict(headers),
        "follow_redirects": settings.follow_redirects,
    }
    if settings.http_timeout_seconds is not None:
        options["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        options["transport"] = transport
    return httpx.AsyncClient(**options)


def to_response_view(response: httpx.Response) -> ResponseView:
    """Snapshot an httpx response (already read) into a `ResponseView`."""

    return ResponseView(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=tuple(response.headers.multi_items()),
        body=response.text,
        content_type=parse_media_type(response.headers.get("content-type")),
    )


async def _send(client: httpx.AsyncClient, descriptor: RequestDescriptor) -> httpx.Response:
    match descriptor:
        case GetRequest(url=url):
            return await client.get(url)
        case PostRequest(url=url):
            return await client.post(url, json=descriptor.json_body())
        case _:
            raise AssertionError(f"unsupported descriptor: {descriptor!r}")


async def execute(client: httpx.AsyncClient, descriptor: RequestDescriptor) -> ResponseView:
    """Perform the single round trip described by `descriptor`.

    Request failures (connect, DNS, timeout, redirect loops, undecodable
    bodies) become `NetworkError`. HTTP error statuses are returned like any
    other response.
    """

    _LOGGER.debug("%s %s", descriptor.method.value, descriptor.url)
    started = time.perf_counter()
    try:
        response = await _send(client, descriptor)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        _LOGGER.debug("Transport failure for %s: %r", descriptor.url, exc)
        raise NetworkError(descriptor.url, str(exc) or type(exc).__name__) from exc

    _LOGGER.debug(
        "%s %s -> %s in %.3fs",
        descriptor.method.value,
        descriptor.url,
        response.status_code,
        time.perf_counter() - started,
    )
    return to_response_view(response)
