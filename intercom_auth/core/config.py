"""Application configuration powered by Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    PROJECT_NAME: str = Field(default="Intercom OAuth")
    VERSION: str = Field(default="0.1.0")

    INTERCOM_CLIENT_ID: str = Field(default="client-id")
    INTERCOM_CLIENT_SECRET: str = Field(default="client-secret")
    INTERCOM_CALLBACK_URL: str | None = Field(default="http://localhost:8000/auth/intercom/callback")
    INTERCOM_AUTHORIZATION_URL: str = Field(default="https://app.intercom.io/oauth")
    INTERCOM_TOKEN_URL: str = Field(default="https://api.intercom.io/auth/eagle/token")
    INTERCOM_PROFILE_URL: str = Field(default="https://api.intercom.io/users")

    HTTP_TIMEOUT: float = Field(default=10.0)

    FRONTEND_URL: str = Field(default="http://localhost:3000")

    SESSION_SECRET: str = Field(default="change-me")
    SESSION_COOKIE_NAME: str = Field(default="intercom_session")
    SESSION_COOKIE_SECURE: bool = Field(default=False)

    LOG_LEVEL: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> Settings:
    """Return cached settings instance to avoid repeated parsing."""

    if overrides:
        return Settings(**overrides)
    return Settings()


settings = get_settings()
