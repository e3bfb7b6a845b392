"""
Module: settings.py
Description: Client configuration using pydantic-settings.

Loads credentials and endpoint selection from IRON_* environment
variables with validation and defaults. Supports .env files for local
development.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ironqueue.config.clouds import Cloud, get_cloud


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IRON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Credentials
    project_id: str = Field(default="", description="Project the queues belong to")
    token: str = Field(default="", description="OAuth token for the project")

    # Endpoint selection
    cloud: str = Field(default="iron_aws_us_east", description="Cloud preset name")
    host: Optional[str] = Field(default=None, description="Host override for the preset")
    scheme: Optional[str] = Field(default=None, description="Scheme override for the preset")
    port: Optional[int] = Field(default=None, ge=1, le=65535, description="Port override for the preset")
    api_version: str = Field(default="1", description="API version path segment")

    # Request settings
    timeout: int = Field(
        default=10,
        ge=1,
        le=120,
        description="HTTP timeout in seconds for queue requests"
    )
    max_per_get: int = Field(
        default=100,
        ge=1,
        description="Default number of messages fetched per get()"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('cloud')
    @classmethod
    def validate_cloud(cls, v: str) -> str:
        """Validate the cloud preset exists."""
        get_cloud(v)
        return v.lower()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    def resolve_cloud(self) -> Cloud:
        """Return the configured preset with any host/scheme/port overrides applied."""
        cloud = get_cloud(self.cloud)
        overrides = {
            key: value
            for key, value in (("host", self.host), ("scheme", self.scheme), ("port", self.port))
            if value is not None
        }
        if not overrides:
            return cloud
        return Cloud(**{**cloud.model_dump(), **overrides})


@lru_cache()
def get_settings() -> Settings:
    """Return the process wide settings instance."""
    return Settings()
