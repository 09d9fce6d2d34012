"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    kolam_env: str = "development"
    kolam_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["*"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"

    # Uploads sent to /api/analyze
    max_upload_bytes: int = 10 * 1024 * 1024

    # Export
    raster_scale: float = 2.0

    # Saved parameter records (JSON file)
    saved_params_file: str = "data/saved_params.json"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
