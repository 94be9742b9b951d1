"""
Runtime configuration helpers for the mock API.

Values come from the process environment first and fall back to a ``.env``
file located in the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Request
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

# Load .env defaults without overriding environment variables provided by the platform
load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    app_name: str = Field(default="CoderComm Mock API", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    environment: str = Field(default="development", validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT"))

    # Backing store
    data_path: Path = Field(default=BASE_DIR / "data.json", alias="DATA_PATH")
    persist_changes: bool = Field(default=True, alias="PERSIST_CHANGES")

    # Session tokens
    jwt_secret: str = Field(default="mockaccesstoken", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expiration: int = Field(default=86400, alias="JWT_EXPIRATION")

    frontend_url: str = Field(default="http://localhost:3000", alias="FRONTEND_URL")
    response_delay_ms: int = Field(default=250, ge=0, alias="RESPONSE_DELAY_MS")

    port: int = Field(default=4000, alias="PORT")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        """Secure cookies are required in production or behind an HTTPS frontend."""

        return self.environment.lower() == "production" or self.frontend_url.startswith("https:")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the running app was built with."""

    return request.app.state.settings


__all__ = ["Settings", "get_settings", "get_app_settings"]
