"""Environment-driven configuration helpers for the round robin calculator."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    min_teams: int = Field(default=3, ge=1)
    max_teams: int = Field(default=8, ge=1)
    min_combination_size: int = Field(default=2, ge=1)
    currency_symbol: str = Field(default="$")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
