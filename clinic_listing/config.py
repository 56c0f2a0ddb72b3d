"""
Configuration settings for the clinic listing pipeline.

Uses Pydantic Settings to load environment variables for logging and listing
defaults. The pipeline itself never reads settings; only the CLI does, and it
passes the resolved values down explicitly.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Listing defaults
    default_page_size: int = Field(10, ge=1, alias="LISTING_DEFAULT_PAGE_SIZE")
    timezone: Optional[str] = Field(None, alias="LISTING_TIMEZONE")

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
