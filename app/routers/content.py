# =============================================================================
# app/routers/content.py - Content Item Endpoints
# =============================================================================
# Public listing of published content; admin create/upload/update/delete.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, Query, Response, status

from app.auth import AdminRequired
from app.dependencies import (
    ContentServiceDep,
    FormBody,
    JsonBody,
    ObjectStorageDep,
    SettingsDep,
)
from app.exceptions import NoFileUploadedError, RecordNotFoundError
from app.uploads import read_upload
from core.models import (
    ContentItem,
    ContentItemCreate,
    ContentItemUpdate,
    ContentType,
    ContentUploadForm,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Content"

CONTENT_TYPES = {content_type.value for content_type in ContentType}


@router.get("", response_model=list[ContentItem])
def list_content(
    service: ContentServiceDep,
    type: Annotated[str | None, Query(description="Filter by content type")] = None,
):
    """
    List published content, optionally only one type.

    An empty `type` means no filter; a type no item can have matches nothing.
    """
    if not type:
        return service.list_published()
    if type not in CONTENT_TYPES:
        return []
    return service.list_published(ContentType(type))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ContentItem,
    dependencies=[AdminRequired],
)
def create_content(body: JsonBody, service: ContentServiceDep) -> Any:
    """Create a content item whose media is already hosted elsewhere."""
    result = validate_payload(ContentItemCreate, body)
    if isinstance(result, Invalid):
        return result.to_response()
    return service.create(result.value)


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=ContentItem,
    dependencies=[AdminRequired],
)
def upload_content(
    form: FormBody,
    service: ContentServiceDep,
    storage: ObjectStorageDep,
    settings: SettingsDep,
) -> Any:
    """
    Upload an image or video and create its content item.

    Expects multipart with an `image` or `video` file part plus the
    ContentUploadForm fields. News items get the URL as `imageUrl`; other
    types get it as `fileUrl`.
    """
    upload = form.first_file("image", "video")
    if upload is None:
        raise NoFileUploadedError()

    result = validate_payload(ContentUploadForm, form.fields)
    if isinstance(result, Invalid):
        return result.to_response()
    fields = result.value

    content = read_upload(upload, settings)
    stored = storage.upload(content, upload.filename, upload.content_type, "content")

    is_news = fields.type == ContentType.NEWS
    item = ContentItemCreate(
        type=fields.type,
        title=fields.title,
        description=fields.description,
        url=stored.url,
        image_url=stored.url if is_news else None,
        file_url=None if is_news else stored.url,
        filename=stored.filename,
        category=fields.category or None,
        is_favourite=fields.is_favourite,
        is_published=fields.is_published,
    )
    return service.create(item)


@router.patch("/{item_id}", response_model=ContentItem, dependencies=[AdminRequired])
def update_content(
    item_id: Annotated[int, Path(description="Content item ID")],
    body: JsonBody,
    service: ContentServiceDep,
) -> Any:
    result = validate_payload(ContentItemUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    if not result.value.model_fields_set:
        return Invalid(message="No fields to update").to_response()

    updated = service.update(item_id, result.value)
    if not updated:
        raise RecordNotFoundError(NOT_FOUND, item_id)
    return updated


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[AdminRequired],
)
def delete_content(
    item_id: Annotated[int, Path(description="Content item ID")],
    service: ContentServiceDep,
    storage: ObjectStorageDep,
):
    """
    Delete a content item, then best-effort delete its stored file.

    Storage failures are logged only; the record is gone either way.
    """
    deleted = service.delete(item_id)
    if deleted and deleted.stored_object_url:
        storage.delete(deleted.stored_object_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
