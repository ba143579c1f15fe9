"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Site
    site_config_path: Path = Path("site.config.json")
    site_url: str | None = None  # Overrides business.url for absolute URLs

    # Scoring
    evaluation_workers: int = Field(default=1, ge=1)  # Threads for combo pages

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"

    def get_evaluation_workers(self, requested: int | None = None) -> int:
        """
        Thread count for combo scoring.

        Args:
            requested: Explicit count (e.g. from a CLI flag); values below 1 are ignored

        Returns:
            The requested count, or the configured default
        """
        if requested is not None and requested >= 1:
            return requested
        return self.evaluation_workers


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
