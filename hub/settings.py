"""
Settings module for the stemcell hub.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from HUB_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hub configuration file (JSON)
    config_path: str = "config.json"

    # Cache invalidation
    cache_drop_interval: float = 0  # seconds, 0 disables periodic drop
    reload_on_sighup: bool = True

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
