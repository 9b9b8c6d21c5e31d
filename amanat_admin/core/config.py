"""
Client configuration models and helpers.

Centralizes settings so the request pipeline, the token store and any tooling
built on top of the console share a consistent configuration surface.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Connection settings for the admin REST API."""

    base_url: str = Field(
        "http://localhost:5000/api",
        description="Root URL every API path is resolved against.",
    )
    timeout_seconds: float = Field(15.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="AMANAT_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class TokenStorageSettings(BaseSettings):
    """Where and how session tokens are persisted between runs."""

    backend: Literal["sqlite", "memory", "none"] = "sqlite"
    db_path: str = Field(".amanat/session.db")
    encryption_secret: Optional[str] = Field(
        None,
        description="Secret used to derive the key that encrypts persisted tokens.",
    )
    access_key: str = "amanat_access_token"
    refresh_key: str = "amanat_refresh_token"

    model_config = SettingsConfigDict(
        env_prefix="AMANAT_TOKEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Root settings object for the admin console client."""

    environment: str = "development"
    log_level: str = "INFO"
    api: ApiSettings = Field(default_factory=ApiSettings)
    storage: TokenStorageSettings = Field(default_factory=TokenStorageSettings)

    model_config = SettingsConfigDict(
        env_prefix="AMANAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "ApiSettings",
    "AppSettings",
    "TokenStorageSettings",
    "get_settings",
]
