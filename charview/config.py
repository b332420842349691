"""
Configuration settings for the Character Viewer.

Uses Pydantic Settings to load environment variables for the upstream API,
view defaults (page size, navigation window), and logging.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Upstream API
    api_base_url: str = Field("https://rickandmortyapi.com/api", alias="API_BASE_URL")
    http_timeout_seconds: float = Field(20.0, gt=0, alias="HTTP_TIMEOUT_SECONDS")
    fetch_max_attempts: int = Field(1, ge=1, le=10, alias="FETCH_MAX_ATTEMPTS")
    fetch_backoff_seconds: float = Field(1.0, ge=0, alias="FETCH_BACKOFF_SECONDS")
    user_agent: str = Field("charview/0.1", min_length=1, alias="USER_AGENT")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # View defaults
    target_count: int = Field(300, ge=1, alias="TARGET_COUNT")
    page_size: int = Field(10, ge=1, alias="PAGE_SIZE")
    window_radius: int = Field(5, ge=0, alias="WINDOW_RADIUS")
    skip_step: int = Field(5, ge=1, alias="SKIP_STEP")
    clamp_page_on_filter: bool = Field(True, alias="CLAMP_PAGE_ON_FILTER")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
