"""Request/response orchestration.

The CLI delegates the network part of an invocation here: build the client
with the default header set, run the single request, hand back the view.
Printing stays in the CLI layer.
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client, execute
from core.config import AppSettings
from core.domain.models import RequestDescriptor, ResponseView


async def perform(
    descriptor: RequestDescriptor,
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseView:
    """Send `descriptor` through a client built once for this invocation."""

    headers = settings.default_headers()
    async with build_async_client(settings, headers=headers, transport=transport) as client:
        return await execute(client, descriptor)
