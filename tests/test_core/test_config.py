"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, KeyValueSplit


class TestAppSettings:
    """Tests for AppSettings defaults and environment overrides."""

    def test_default_headers(self, settings: AppSettings) -> None:
        assert settings.default_headers() == {
            "X-POWERED-BY": "Python",
            "User-Agent": "Python Httpie",
        }

    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.http_timeout_seconds is None
        assert settings.follow_redirects is True
        assert settings.json_indent == 2
        assert settings.kv_split is KeyValueSplit.REST

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPIE_LITE_USER_AGENT", "custom/1.0")
        monkeypatch.setenv("HTTPIE_LITE_KV_SPLIT", "segment")
        monkeypatch.setenv("HTTPIE_LITE_HTTP_TIMEOUT_SECONDS", "3.5")

        settings = AppSettings(_env_file=None)

        assert settings.default_headers()["User-Agent"] == "custom/1.0"
        assert settings.kv_split is KeyValueSplit.SEGMENT
        assert settings.http_timeout_seconds == 3.5

    def test_settings_are_read_only(self, settings: AppSettings) -> None:
        with pytest.raises(ValidationError):
            settings.user_agent = "changed"  # type: ignore[misc]
