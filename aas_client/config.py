"""
Client configuration using Pydantic Settings.

Supports environment variables (prefix ``AAS_CLIENT_``) and .env files.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Service
    endpoint: str = "http://localhost:443/api/v3.0"

    # Transport
    timeout_seconds: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    trust_all_certificates: bool = False
    proxy: str | None = None

    # Basic authentication
    username: str | None = None
    password: str | None = None

    # Bearer token, sent as "Authorization: Bearer <token>"
    bearer_token: str | None = None

    @field_validator("endpoint", mode="before")
    @classmethod
    def strip_endpoint(cls, v):
        if isinstance(v, str):
            value = v.strip()
            if value.endswith("/"):
                value = value[:-1]
            return value
        return v

    @field_validator("proxy", "username", "password", "bearer_token", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "env_prefix": "AAS_CLIENT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> ClientSettings:
    """Get cached settings instance."""
    return ClientSettings()
