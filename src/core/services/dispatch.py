"""Assembly of request descriptors from already-validated arguments."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import (
    GetRequest,
    KeyValuePair,
    Method,
    PostRequest,
    RequestDescriptor,
)


def build_descriptor(
    method: Method,
    url: str,
    fields: Iterable[KeyValuePair] = (),
) -> RequestDescriptor:
    """Build exactly one descriptor variant for `method`.

    No validation happens here; an unsupported method is a programming error.
    """

    match method:
        case Method.GET:
            return GetRequest(url=url)
        case Method.POST:
            return PostRequest(url=url, fields=tuple(fields))
        case _:
            raise AssertionError(f"unsupported method: {method!r}")
