"""
Configuration settings for the city density report.

Uses Pydantic Settings to read logging options from the environment or a
``.env`` file. The dataset itself is compiled in and is not configurable.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("WARNING", alias="CITY_DENSITY_LOG_LEVEL")
    log_json: bool = Field(False, alias="CITY_DENSITY_LOG_JSON")

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
