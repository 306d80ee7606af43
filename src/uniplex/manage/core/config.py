# uniplex/manage/core/config.py
"""
Central configuration for the management client.

Environment variables (``UNIPLEX_*``) override defaults.
"""
from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="UNIPLEX_", env_file=".env", extra="ignore"
    )

    api_url: str = Field(
        default="https://uniplex.ai",
        description="Base URL of the Uniplex dashboard API",
    )
    api_key: str = Field(
        default="",
        description="Bearer credential (sk_... or uni_...)",
    )

    log_level: str = "INFO"
    log_json: bool = Field(
        default=False,
        description="Emit log records as JSON lines",
    )

    # Off by default: the remote service owns argument validation
    validate_arguments: bool = Field(
        default=False,
        description="Validate argument records against operation schemas before sending",
    )
    timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (empty = no timeout)",
    )

    @field_validator("timeout", mode="before")
    @classmethod
    def _empty_timeout(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
