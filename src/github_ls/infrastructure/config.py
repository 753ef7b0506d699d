"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "github-ls"
APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Central configuration loaded from ``GITHUB_LS_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_LS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "https://github.com"
    user_agent: str = f"Mozilla/5.0 (compatible; {APP_NAME}/{APP_VERSION})"
    request_timeout: float | None = None
    log_level: str = "WARNING"
    colors: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
