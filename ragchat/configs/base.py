"""
Base configuration settings.

Provides common configuration inherited by all specific config modules.
Handles environment detection, server binding and CORS defaults.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    host: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    port: int = Field(default=3000, description="HTTP port")
    cors_origins: list[str] = Field(
        default=["http://localhost:4200", "https://localhost:4200"],
        description="Origins allowed to call the API from a browser",
    )
