"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Rocket.Chat (base URL includes the REST prefix, e.g. https://chat.example.com/api/v1)
    rocketchat_url: str = "http://localhost:3000/api/v1"
    rocketchat_user: str = ""
    rocketchat_password: str = ""
    request_timeout_seconds: float = 10.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
