"""Configuration management for the Room Token Server."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_allow_origins: list[str] = ["http://localhost:3000"]

    # LiveKit credentials. Empty is allowed at startup; requests are refused until both are set.
    livekit_api_key: str = ""
    livekit_api_secret: str = ""

    # Token settings
    token_provider: str = "livekit"
    token_ttl_seconds: int = 6 * 60 * 60

    @property
    def credentials_configured(self) -> bool:
        return bool(self.livekit_api_key) and bool(self.livekit_api_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
