"""
Configuration management for the contacts service.

Settings are read from the process environment (and an optional `.env` file)
through Pydantic's `BaseSettings`. The application factory, the storage
gateway and the CLI all consume the cached instance returned by
`get_settings()`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    API_TITLE: str = "Contactbook API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    # Comma separated; see `allowed_origins`
    ALLOWED_ORIGINS: str = "*"

    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: PositiveInt = 3000

    # Document store
    MONGODB_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "contactsdb"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: PositiveInt = 5000
    ENFORCE_UNIQUE_EMAIL: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("LOG_LEVEL", mode="before")
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()
