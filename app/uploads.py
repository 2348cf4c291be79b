# =============================================================================
# app/uploads.py - Upload Validation
# =============================================================================
# Checks an incoming file part against the configured MIME allow-list and
# size limit, then hands back its bytes for ObjectStorage.upload().
# =============================================================================

import logging

from fastapi import UploadFile

from app.config import Settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError

logger = logging.getLogger(__name__)


def read_upload(upload: UploadFile, settings: Settings) -> bytes:
    """
    Validate and read an uploaded file.

    Runs inside sync route handlers (threadpool), so the spooled file is
    read directly.

    Raises:
        InvalidFileTypeError: If the declared content type isn't allowed
        FileTooLargeError: If the file exceeds MAX_UPLOAD_SIZE_MB
    """
    content_type = (upload.content_type or "").lower()
    if content_type not in settings.allowed_mime_types_list:
        raise InvalidFileTypeError(upload.content_type)

    content = upload.file.read(settings.max_upload_size_bytes + 1)
    if len(content) > settings.max_upload_size_bytes:
        raise FileTooLargeError(len(content) / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    logger.info(f"Received upload: {upload.filename} ({len(content) / (1024 * 1024):.2f}MB)")
    return content
