"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give us immutable values with self-documenting fields.
- The request descriptor is a discriminated union, so each method is a
  distinct type that the executor matches on exhaustively.

Note:
- These models describe *what* is requested and received, not *how*.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Method(str, Enum):
    """HTTP methods exposed as CLI subcommands."""

    GET = "GET"
    POST = "POST"


class KeyValuePair(BaseModel):
    """One `key=value` body field taken from the command line."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        description="Text before the first `=` of the token.",
    )
    value: str = Field(
        ...,
        description="Text after the first `=` (see `KeyValueSplit`).",
    )


class GetRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal[Method.GET] = Method.GET
    url: str = Field(..., min_length=1, description="Validated absolute URL.")


class PostRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal[Method.POST] = Method.POST
    url: str = Field(..., min_length=1, description="Validated absolute URL.")
    fields: tuple[KeyValuePair, ...] = Field(
        default=(),
        description="Body fields in command-line order.",
    )

    def json_body(self) -> dict[str, str]:
        """Fold the fields into a mapping; a repeated key keeps its last value."""

        body: dict[str, str] = {}
        for item in self.fields:
            body[item.key] = item.value
        return body


RequestDescriptor = Annotated[
    Union[GetRequest, PostRequest],
    Field(discriminator="method"),
]


class MediaType(BaseModel):
    """Parsed `Content-Type` value."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1)
    subtype: str = Field(..., min_length=1)
    parameters: dict[str, str] = Field(default_factory=dict)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"


class ResponseView(BaseModel):
    """Read-only view over a received response.

    Headers keep the order in which they were received; a repeated header name
    appears once per occurrence.
    """

    model_config = ConfigDict(frozen=True)

    http_version: str = Field(
        ...,
        description="Protocol version as reported by the transport (e.g. 'HTTP/1.1').",
    )
    status_code: int = Field(..., ge=100, le=999)
    reason_phrase: str = Field(default="")
    headers: tuple[tuple[str, str], ...] = Field(default=())
    body: str = Field(default="")
    content_type: MediaType | None = Field(
        default=None,
        description="Parsed `Content-Type`, absent when missing or unparseable.",
    )

    @property
    def status_line(self) -> str:
        status = f"{self.status_code} {self.reason_phrase}".rstrip()
        return f"{self.http_version} {status}"
