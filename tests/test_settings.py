"""
Configuration Tests.

This module tests loading Settings from TICKTICK_* environment variables.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ticktick_open_mcp.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ticktick_open_mcp.settings import Settings

pytestmark = [pytest.mark.settings, pytest.mark.unit]


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        """Test settings without any environment."""
        settings = Settings(_env_file=None)

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.log_level == "INFO"
        assert settings.bearer_token is None
        assert not settings.has_credentials
        assert not settings.has_oauth_app

    def test_access_token_from_env(self, monkeypatch):
        """Test reading TICKTICK_ACCESS_TOKEN."""
        monkeypatch.setenv("TICKTICK_ACCESS_TOKEN", "abc")
        settings = Settings(_env_file=None)

        assert settings.bearer_token == "abc"
        assert settings.has_credentials

    def test_access_token_preferred(self, monkeypatch):
        """Test that TICKTICK_ACCESS_TOKEN wins over TICKTICK_TOKEN."""
        monkeypatch.setenv("TICKTICK_ACCESS_TOKEN", "primary")
        monkeypatch.setenv("TICKTICK_TOKEN", "secondary")

        assert Settings(_env_file=None).bearer_token == "primary"

    def test_token_fallback(self, monkeypatch):
        """Test that TICKTICK_TOKEN is used on its own."""
        monkeypatch.setenv("TICKTICK_TOKEN", "secondary")
        assert Settings(_env_file=None).bearer_token == "secondary"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_token_ignored(self, monkeypatch, value: str):
        """Test that blank tokens count as unset."""
        monkeypatch.setenv("TICKTICK_ACCESS_TOKEN", value)
        monkeypatch.setenv("TICKTICK_TOKEN", "secondary")

        settings = Settings(_env_file=None)
        assert settings.access_token is None
        assert settings.bearer_token == "secondary"

    def test_oauth_app(self, monkeypatch):
        """Test detection of OAuth client credentials."""
        monkeypatch.setenv("TICKTICK_CLIENT_ID", "id")
        monkeypatch.setenv("TICKTICK_CLIENT_SECRET", "secret")

        settings = Settings(_env_file=None)
        assert settings.has_oauth_app
        assert not settings.has_credentials

    def test_upstream_overrides(self, monkeypatch):
        """Test base URL, timeout and log level overrides."""
        monkeypatch.setenv("TICKTICK_BASE_URL", "https://api.dida365.com/open/v1/")
        monkeypatch.setenv("TICKTICK_TIMEOUT", "5")
        monkeypatch.setenv("TICKTICK_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)
        assert settings.base_url == "https://api.dida365.com/open/v1"
        assert settings.timeout == 5.0
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["0", "-1", "soon"])
    def test_invalid_timeout(self, monkeypatch, value: str):
        """Test that non-positive or non-numeric timeouts are rejected."""
        monkeypatch.setenv("TICKTICK_TIMEOUT", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        """Test loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("TICKTICK_ACCESS_TOKEN=from-file\nUNRELATED=1\n")

        assert Settings(_env_file=env_file).bearer_token == "from-file"
