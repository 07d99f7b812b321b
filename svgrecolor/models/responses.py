"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class BoundingBoxModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    viewbox: str


class ConvertResponse(BaseModel):
    svg: str
    colors_replaced: int = 0
    bbox: BoundingBoxModel | None = None
    envelope: bool = False


class UploadResult(BaseModel):
    """One converted upload. Field names match the web client's camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    original_name: str = Field(..., alias="originalName")
    converted_path: str | None = Field(default=None, alias="convertedPath")
    error: str | None = None


class MultipleUploadResponse(BaseModel):
    results: list[UploadResult] = Field(default_factory=list)


class CleanupResponse(BaseModel):
    message: str
    deleted: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
