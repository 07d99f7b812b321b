"""Application configuration from environment variables."""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgrecolor_env: str = "development"
    svgrecolor_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upload storage
    upload_dir: Path = Path(tempfile.gettempdir()) / "svgrecolor-uploads"
    # Ephemeral hosting: the platform clears the temp dir, so no periodic purge
    serverless: bool = False
    max_upload_bytes: int = 5 * 1024 * 1024
    max_batch_files: int = 10

    # Periodic cleanup
    file_ttl_seconds: int = 60 * 60
    cleanup_interval_seconds: int = 60 * 60

    crop_by_default: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
