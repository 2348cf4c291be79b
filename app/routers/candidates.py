# =============================================================================
# app/routers/candidates.py - Verified Candidate Endpoints
# =============================================================================
# Listing is public (approved only) unless an admin token is presented, in
# which case every candidate is returned.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, status

from app.auth import AdminRequired, IsAdmin
from app.dependencies import (
    CandidateServiceDep,
    FormBody,
    JsonBody,
    ObjectStorageDep,
    SettingsDep,
)
from app.exceptions import NoFileUploadedError, RecordNotFoundError
from app.uploads import read_upload
from core.models import (
    CandidateStatusUpdate,
    CandidateUploadForm,
    VerifiedCandidate,
    VerifiedCandidateCreate,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Candidate"


@router.get("", response_model=list[VerifiedCandidate])
def list_candidates(admin: IsAdmin, service: CandidateServiceDep):
    """Approved candidates for the public site; all of them for admins."""
    if admin:
        return service.list_all()
    return service.list_approved()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=VerifiedCandidate,
    dependencies=[AdminRequired],
)
def create_candidate(body: JsonBody, service: CandidateServiceDep) -> Any:
    result = validate_payload(VerifiedCandidateCreate, body)
    if isinstance(result, Invalid):
        return result.to_response()
    return service.create(result.value)


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=VerifiedCandidate,
    dependencies=[AdminRequired],
)
def upload_candidate(
    form: FormBody,
    service: CandidateServiceDep,
    storage: ObjectStorageDep,
    settings: SettingsDep,
) -> Any:
    """
    Create a candidate with a photo.

    Expects multipart with an `image` file part plus the CandidateUploadForm
    fields; the stored photo's URL becomes `imageUrl`.
    """
    upload = form.first_file("image")
    if upload is None:
        raise NoFileUploadedError("No image uploaded")

    result = validate_payload(CandidateUploadForm, form.fields)
    if isinstance(result, Invalid):
        return result.to_response()

    content = read_upload(upload, settings)
    stored = storage.upload(content, upload.filename, upload.content_type, "candidates")

    candidate = VerifiedCandidateCreate(
        **result.value.model_dump(),
        image_url=stored.url,
    )
    return service.create(candidate)


@router.patch("/{candidate_id}", response_model=VerifiedCandidate, dependencies=[AdminRequired])
def update_candidate_status(
    candidate_id: Annotated[int, Path(description="Candidate ID")],
    body: JsonBody,
    service: CandidateServiceDep,
) -> Any:
    result = validate_payload(CandidateStatusUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    updated = service.update_status(candidate_id, result.value.status)
    if not updated:
        raise RecordNotFoundError(NOT_FOUND, candidate_id)
    return updated
