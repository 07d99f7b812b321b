"""FastAPI dependency injection."""

from __future__ import annotations

from svgrecolor.config import Settings, settings
from svgrecolor.storage import UploadStore, get_upload_store


def get_settings() -> Settings:
    return settings


def get_store() -> UploadStore:
    return get_upload_store()
