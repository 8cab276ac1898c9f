"""Configuration management using pydantic-settings.

Supports environment variables (FEEDKIT_ prefix) and .env file loading.
Only the fetch/parse layer and the CLI read settings; the builders take
no configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDKIT_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False  # Set True in production for structured logs

    # Fetching
    fetch_timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")
    user_agent: str = "feedkit/0.1 (RSS reader)"

    # Parsing
    strict_parsing: bool = Field(
        default=False,
        description="Raise on invalid items/elements instead of skipping them",
    )


# Global singleton instance
settings = Settings()
