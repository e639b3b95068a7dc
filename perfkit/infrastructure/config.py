"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Commerce platform admin API
    medusa_backend_url: str = "http://localhost:9000"
    medusa_api_token: str = "dev-admin-token-change-in-production"
    medusa_timeout: float = 30.0

    # Performance routes slower than this are logged as warnings
    slow_request_ms: float = 1000.0

    # Logging
    log_level: str = "INFO"


settings = Settings()
