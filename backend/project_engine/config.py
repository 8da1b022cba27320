"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Project Engine"
    debug: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Project history persistence
    storage_backend: Literal["file", "redis", "memory"] = "file"
    storage_dir: str = ".project_engine"
    storage_key: str = "project_engine_history"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Text generation API
    generation_api_url: str = "https://text.pollinations.ai"
    generation_model: str = "openai"
    generation_timeout_seconds: float | None = None  # No timeout: a hung call stays pending

    # Image generation API
    image_api_url: str = "https://image.pollinations.ai"
    image_size: int = 512

    # Preview snapshots
    snapshot_enabled: bool = False
    playwright_ws_url: str = "ws://localhost:3000"
    snapshot_scale: float = 0.5
    snapshot_quality: int = 30  # JPEG quality, 0-100

    # Projects created from a first prompt are titled with its prefix
    default_project_title_length: int = 40


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
