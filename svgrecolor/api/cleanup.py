"""POST /api/cleanup — delete stored files after the client has downloaded them."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from svgrecolor.dependencies import get_store
from svgrecolor.models.requests import CleanupRequest
from svgrecolor.models.responses import CleanupResponse
from svgrecolor.storage import UploadStore

router = APIRouter()


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup(req: CleanupRequest, store: UploadStore = Depends(get_store)) -> CleanupResponse:
    if not req.files:
        raise HTTPException(status_code=400, detail="No files specified for cleanup")
    deleted, failed = store.cleanup(req.files)
    return CleanupResponse(
        message=f"Cleanup complete. Deleted {len(deleted)} files.",
        deleted=deleted,
        failed=failed,
    )
