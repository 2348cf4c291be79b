# =============================================================================
# app/routers/storage.py - Stored Object Serving
# =============================================================================
# Public read path for uploaded assets: /storage/<folder>/<filename> streams
# public/<folder>/<filename> from the bucket.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from app.dependencies import ObjectStorageDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{folder}/{filename}", response_class=StreamingResponse)
async def serve_object(
    folder: Annotated[str, Path(description="Logical folder, e.g. content")],
    filename: Annotated[str, Path(description="Generated object filename")],
    storage: ObjectStorageDep,
):
    """
    Stream a stored object to the client.

    The body is relayed chunk by chunk; the upstream response is closed
    once it has been sent.
    """
    stream = await storage.open_stream(folder, filename)
    logger.debug(f"Serving {folder}/{filename} ({stream.content_type})")

    headers = {"Cache-Control": storage.cache_control}
    if stream.content_length is not None:
        headers["Content-Length"] = stream.content_length

    return StreamingResponse(
        stream.body,
        media_type=stream.content_type,
        headers=headers,
        background=BackgroundTask(stream.close),
    )
