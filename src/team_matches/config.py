"""Configuration management for the team matches viewer.

Provides:
- Match data API base URL, request timeout and user agent
- Statistics feature toggle
- Logging level and optional log file
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load environment from .env if present
load_dotenv(override=False)


class ApiSettings(BaseSettings):
    """Match data API settings."""

    model_config = SettingsConfigDict(extra="ignore")

    base_url: str = Field(default="https://apis.ccbp.in/ipl/", validation_alias="TEAM_MATCHES_API_BASE_URL")
    timeout: float = Field(default=30.0, validation_alias="TEAM_MATCHES_TIMEOUT")
    user_agent: str = Field(default="TeamMatchesBot/1.0", validation_alias="TEAM_MATCHES_USER_AGENT")


class FeatureSettings(BaseSettings):
    """Optional view capabilities."""

    model_config = SettingsConfigDict(extra="ignore")

    enable_statistics: bool = Field(default=True, validation_alias="TEAM_MATCHES_ENABLE_STATISTICS")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(extra="ignore")

    level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(extra="ignore")

    api: ApiSettings = Field(default_factory=ApiSettings)
    features: FeatureSettings = Field(default_factory=FeatureSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from environment."""
    return Settings()
