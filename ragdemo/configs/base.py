"""
Base configuration settings.

Shared `.env` loading and process-wide switches.

Dependencies: pydantic_settings
System role: Parent of the top-level Settings class
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Reads `.env` and unprefixed environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="Deployment name, shown in logs only")
    debug: bool = Field(default=False, description="Passed to FastAPI")
    log_level: str = Field(default="INFO", description="Root logger level for configure_logging")
