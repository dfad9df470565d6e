"""
Configuration for the Subtext SDK.

Values are read from the environment or a local .env file. Arguments passed
explicitly to SubtextClient take precedence over these settings.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://app.trysubtext.com"


class Settings(BaseSettings):
    """
    Settings for the Subtext client.

    Environment variables are loaded from .env file and can be overridden
    by actual environment variables.
    """

    # Credentials
    SUBTEXT_API_KEY: str = ""

    # Transport
    SUBTEXT_BASE_URL: str = DEFAULT_BASE_URL
    SUBTEXT_TIMEOUT: int = 30000  # milliseconds
    SUBTEXT_MAX_RETRIES: int = 3

    # Logging
    SUBTEXT_LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )


# Global settings instance
settings = Settings()  # type: ignore
