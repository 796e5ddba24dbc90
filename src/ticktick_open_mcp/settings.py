"""
Configuration for the TickTick Open API MCP server.

Settings are read from environment variables (and an optional ``.env`` file)
with pydantic-settings, then handed explicitly to the client and dispatcher.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticktick_open_mcp.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Server settings loaded from ``TICKTICK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TICKTICK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    access_token: Optional[str] = Field(default=None, description="OAuth2 access token")
    token: Optional[str] = Field(default=None, description="Fallback access token")
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    auth_code: Optional[str] = None

    # Upstream
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    log_level: str = "INFO"

    @field_validator("access_token", "token", "client_id", "client_secret", "auth_code", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def bearer_token(self) -> Optional[str]:
        """Token sent upstream, preferring TICKTICK_ACCESS_TOKEN over TICKTICK_TOKEN."""
        return self.access_token or self.token

    @property
    def has_credentials(self) -> bool:
        return self.bearer_token is not None

    @property
    def has_oauth_app(self) -> bool:
        return bool(self.client_id and self.client_secret)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
