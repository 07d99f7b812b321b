"""POST /api/convert* — single, multi-file and raw-text conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from svgrecolor.config import Settings
from svgrecolor.dependencies import get_settings, get_store
from svgrecolor.engine.config import ConversionOptions
from svgrecolor.engine.pipeline import run_conversion
from svgrecolor.errors import ConversionError
from svgrecolor.models.requests import ConvertRequest
from svgrecolor.models.responses import BoundingBoxModel, ConvertResponse, MultipleUploadResponse, UploadResult
from svgrecolor.storage import UploadStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert")


class UploadRejected(Exception):
    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


@router.post("", response_model=ConvertResponse)
async def convert_text(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    crop = settings.crop_by_default if req.crop is None else req.crop
    options = ConversionOptions(crop=crop, require_semicolon=req.require_semicolon)
    try:
        ctx = run_conversion(req.svg, options, source="request body")
    except ConversionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    bbox = None
    if ctx.bbox is not None:
        bbox = BoundingBoxModel(
            min_x=ctx.bbox.min_x,
            min_y=ctx.bbox.min_y,
            max_x=ctx.bbox.max_x,
            max_y=ctx.bbox.max_y,
            viewbox=ctx.bbox.viewbox,
        )
    return ConvertResponse(
        svg=ctx.output,
        colors_replaced=ctx.colors_replaced,
        bbox=bbox,
        envelope=ctx.envelope is not None,
    )


async def _convert_upload(
    upload: UploadFile,
    store: UploadStore,
    settings: Settings,
    options: ConversionOptions,
) -> str:
    """Validate, store and convert one upload. Returns the converted file's stored name."""
    name = upload.filename or "upload.svg"
    if Path(name).suffix.lower() != ".svg":
        raise UploadRejected(400, "Only SVG files are allowed")

    data = await upload.read()
    if len(data) > settings.max_upload_bytes:
        raise UploadRejected(413, f"File exceeds {settings.max_upload_bytes} bytes")
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UploadRejected(400, f"File is not UTF-8 text: {e}") from e

    stored = store.save_upload(name, data)
    try:
        ctx = run_conversion(text, options, source=name)
    except ConversionError as e:
        store.discard(stored)
        raise UploadRejected(422, str(e)) from e
    return store.save_converted(stored, ctx.output)


def _options(crop: bool | None, settings: Settings) -> ConversionOptions:
    return ConversionOptions(crop=settings.crop_by_default if crop is None else crop)


@router.post("/single", response_model=UploadResult, response_model_exclude_none=True)
async def convert_single(
    svgFile: UploadFile | None = File(default=None),
    crop: bool | None = Form(default=None),
    settings: Settings = Depends(get_settings),
    store: UploadStore = Depends(get_store),
) -> UploadResult:
    if svgFile is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    try:
        converted = await _convert_upload(svgFile, store, settings, _options(crop, settings))
    except UploadRejected as e:
        logger.warning("Rejected %s: %s", svgFile.filename, e.detail)
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return UploadResult(original_name=svgFile.filename or "", converted_path=converted)


@router.post("/multiple", response_model=MultipleUploadResponse)
async def convert_multiple(
    svgFiles: list[UploadFile] | None = File(default=None),
    crop: bool | None = Form(default=None),
    settings: Settings = Depends(get_settings),
    store: UploadStore = Depends(get_store),
) -> MultipleUploadResponse:
    if not svgFiles:
        raise HTTPException(status_code=400, detail="No files uploaded")
    if len(svgFiles) > settings.max_batch_files:
        raise HTTPException(status_code=400, detail=f"At most {settings.max_batch_files} files per request")

    options = _options(crop, settings)
    results: list[UploadResult] = []
    for upload in svgFiles:
        name = upload.filename or ""
        try:
            converted = await _convert_upload(upload, store, settings, options)
        except UploadRejected as e:
            logger.warning("Rejected %s: %s", name, e.detail)
            results.append(UploadResult(original_name=name, error=e.detail))
            continue
        results.append(UploadResult(original_name=name, converted_path=converted))
    return MultipleUploadResponse(results=results)
