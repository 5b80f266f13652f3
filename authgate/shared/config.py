"""
Centralized configuration for authgate.

All settings are loaded from environment variables prefixed with AUTH_
(e.g. AUTH_JWT_SECRET, AUTH_STRICT_CHECKSUM) with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sessions
    session_key: str = "auth"

    # Raise instead of falling back to anonymous when a session checksum
    # doesn't match the user
    strict_checksum: bool = False

    # JWT sessions
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_ttl: int = 86400  # seconds

    # Bearer sessions
    bearer_id_format: str = "{}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
