"""Configuration settings for fitness-analytics."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``FITNESS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Logging
    log_level: str = "INFO"

    # Default record snapshot for the CLI
    snapshot_path: Optional[Path] = None

    # Analytics
    summary_days: int = 7
    default_body_weight_kg: Optional[float] = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
