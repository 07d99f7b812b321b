"""FastAPI app factory."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgrecolor import __version__
from svgrecolor.config import settings
from svgrecolor.storage import get_upload_store

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgrecolor_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _purge_periodically(interval: float, max_age: float) -> None:
    """Delete stored files older than ``max_age`` every ``interval`` seconds."""
    store = get_upload_store()
    while True:
        await asyncio.sleep(interval)
        try:
            store.purge_expired(max_age)
        except OSError as e:
            logger.error("Error cleaning up uploads: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    task: asyncio.Task | None = None
    if not settings.serverless:
        task = asyncio.create_task(
            _purge_periodically(settings.cleanup_interval_seconds, settings.file_ttl_seconds)
        )
    logger.info("Using upload directory: %s", settings.upload_dir)
    try:
        yield
    finally:
        if task is not None:
            task.cancel()


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgrecolor",
        description="SVG color converter — hard-coded colors to currentColor, optional canvas crop",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgrecolor.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
