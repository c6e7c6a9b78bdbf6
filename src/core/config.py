"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Adapters (HTTP client, renderer) read configuration the same way.

The settings are built once per invocation and passed down explicitly.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KeyValueSplit(str, Enum):
    """How a `key=value` token holding several `=` is split."""

    # `a=b=c` -> value `b=c`
    REST = "rest"
    # `a=b=c` -> value `b`
    SEGMENT = "segment"


class AppSettings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPIE_LITE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    user_agent: str = Field(
        default="Python Httpie",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    powered_by: str = Field(
        default="Python",
        min_length=1,
        description="Value of the X-POWERED-BY marker header.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout (seconds). None keeps the httpx default.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx responses to their target.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when pretty-printing JSON bodies.",
    )
    kv_split: KeyValueSplit = Field(
        default=KeyValueSplit.REST,
        description="Split mode for body tokens holding more than one `=`.",
    )

    def default_headers(self) -> dict[str, str]:
        """Headers attached to every outbound request, whatever the method."""

        return {
            "X-POWERED-BY": self.powered_by,
            "User-Agent": self.user_agent,
        }
