# =============================================================================
# core/models/storage.py - Object Storage Schemas
# =============================================================================

from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable

from pydantic import BaseModel, Field


class UploadResult(BaseModel):
    """
    Where an uploaded buffer ended up.

    Example:
        {
            "url": "/storage/candidates/1718000000000-512.PNG",
            "object_path": "public/candidates/1718000000000-512.PNG",
            "filename": "1718000000000-512.PNG"
        }
    """

    url: str = Field(..., description="Public serving path")
    object_path: str = Field(..., description="Full key inside the bucket")
    filename: str = Field(..., description="Generated filename, persisted with the owning record")


@dataclass
class ObjectStream:
    """An open read of a stored object; `close` must run once the body is consumed."""
    content_type: str
    content_length: str | None
    body: AsyncIterator[bytes]
    close: Callable[[], Awaitable[None]]
