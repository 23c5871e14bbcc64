"""
Configuration Utility - Environment Variables Management

Centralized configuration loading from .env files using pydantic-settings.
Type-safe access to all environment variables with validation. The defaults
reproduce the poller's fixed behavior, so an empty environment polls the
cat-fact API five times, five seconds apart, into ./data.

Usage:
    from utils.config import settings

    url = settings.POLL_URL
    store_dir = settings.STORE_DIR
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream API
    POLL_URL: str = Field(default="https://cat-fact.herokuapp.com/facts/random")
    HTTP_TIMEOUT: float = Field(default=30)

    # Run loop
    POLL_ITERATIONS: int = Field(default=5, ge=1)
    POLL_INTERVAL_MS: int = Field(default=5000, ge=0)

    # File System Paths
    STORE_DIR: str = Field(default="data")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="text")

    # Application Metadata
    APP_NAME: str = Field(default="catfact-poller")
    APP_VERSION: str = Field(default="0.1.0")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
