"""Pydantic-based settings for the dropl CLI."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the dropl CLI."""

    model_config = SettingsConfigDict(
        env_prefix="DROPL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote service
    base_url: str = Field(default="https://img-nest.vercel.app", description="Base URL of the dropl API")
    timeout: float = Field(default=300.0, description="HTTP timeout in seconds")

    # Local credentials
    config_path: Path = Field(
        default_factory=lambda: Path.home() / ".dropl-cli-config.json",
        description="File holding the stored bearer token",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    @property
    def log_format(self) -> str:
        """Log message format."""
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
