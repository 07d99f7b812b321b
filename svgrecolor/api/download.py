"""GET /api/download* — converted file and zip archive downloads."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, Response

from svgrecolor.dependencies import get_store
from svgrecolor.storage import ARCHIVE_NAME, CONVERTED_PREFIX, UploadStore

router = APIRouter()


@router.get("/download/{filename}")
async def download(filename: str, store: UploadStore = Depends(get_store)) -> FileResponse:
    path = store.resolve(filename)
    if path is None:
        raise HTTPException(status_code=404, detail="File not found")
    name = path.name if path.name.startswith(CONVERTED_PREFIX) else CONVERTED_PREFIX + path.name
    return FileResponse(path, media_type="image/svg+xml", filename=name)


@router.get("/download-zip")
async def download_zip(request: Request, store: UploadStore = Depends(get_store)) -> Response:
    """Zip the comma-separated ``files`` ids; other query params map an id to its name in the archive."""
    files = request.query_params.get("files", "")
    file_ids = [f for f in files.split(",") if f]
    if not file_ids:
        raise HTTPException(status_code=400, detail="No files specified")

    names = {k: v for k, v in request.query_params.items() if k != "files"}
    try:
        data, _ = store.build_archive(file_ids, names)
    except FileNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return Response(
        content=data,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ARCHIVE_NAME}"'},
    )
