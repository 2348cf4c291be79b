# =============================================================================
# app/routers/templates.py - Downloadable Template Endpoints
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, Response, status

from app.auth import AdminRequired
from app.dependencies import (
    FormBody,
    JsonBody,
    ObjectStorageDep,
    SettingsDep,
    TemplateServiceDep,
)
from app.exceptions import NoFileUploadedError, RecordNotFoundError
from app.uploads import read_upload
from core.models import (
    Template,
    TemplateCreate,
    TemplatePublishUpdate,
    TemplateUploadForm,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Template"


@router.get("", response_model=list[Template])
def list_published_templates(service: TemplateServiceDep):
    return service.list_published()


@router.get("/all", response_model=list[Template], dependencies=[AdminRequired])
def list_all_templates(service: TemplateServiceDep):
    return service.list_all()


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=Template,
    dependencies=[AdminRequired],
)
def upload_template(
    form: FormBody,
    service: TemplateServiceDep,
    storage: ObjectStorageDep,
    settings: SettingsDep,
) -> Any:
    """Store a template document and create its record."""
    upload = form.first_file("file")
    if upload is None:
        raise NoFileUploadedError()

    result = validate_payload(TemplateUploadForm, form.fields)
    if isinstance(result, Invalid):
        return result.to_response()
    fields = result.value

    content = read_upload(upload, settings)
    stored = storage.upload(content, upload.filename, upload.content_type, "templates")

    template = TemplateCreate(
        title=fields.title,
        description=fields.description,
        filename=stored.filename,
        file_url=stored.url,
        file_type=fields.file_type,
        is_published=fields.is_published,
    )
    return service.create(template)


@router.patch("/{template_id}", response_model=Template, dependencies=[AdminRequired])
def update_template_status(
    template_id: Annotated[int, Path(description="Template ID")],
    body: JsonBody,
    service: TemplateServiceDep,
) -> Any:
    """Publish or unpublish a template."""
    result = validate_payload(TemplatePublishUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    updated = service.update_status(template_id, result.value.is_published)
    if not updated:
        raise RecordNotFoundError(NOT_FOUND, template_id)
    return updated


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[AdminRequired],
)
def delete_template(
    template_id: Annotated[int, Path(description="Template ID")],
    service: TemplateServiceDep,
    storage: ObjectStorageDep,
):
    """Delete a template record, then best-effort delete its stored file."""
    deleted = service.delete(template_id)
    if deleted:
        storage.delete(deleted.file_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
