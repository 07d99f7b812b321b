"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code or a base64 data:image/svg+xml URI")
    crop: bool | None = Field(default=None, description="Crop the canvas to the artwork (server default if omitted)")
    require_semicolon: bool = Field(
        default=True,
        description="Leave a final style declaration without ';' untouched",
    )


class CleanupRequest(BaseModel):
    files: list[str] = Field(default_factory=list, description="Stored file ids to delete")
