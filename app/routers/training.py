# =============================================================================
# app/routers/training.py - Training Request Endpoints
# =============================================================================
# Public submission at /api/training-requests; admin review under
# /api/admin/training-requests.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, status

from app.auth import AdminRequired
from app.dependencies import JsonBody, TrainingRequestServiceDep
from app.exceptions import RecordNotFoundError
from core.models import (
    SubmissionResponse,
    TrainingRequest,
    TrainingRequestCreate,
    TrainingRequestStatusUpdate,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter(dependencies=[AdminRequired])

NOT_FOUND = "Training request"


@router.post(
    "/training-requests",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmissionResponse,
)
def submit_training_request(body: JsonBody, service: TrainingRequestServiceDep) -> Any:
    result = validate_payload(TrainingRequestCreate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    request = service.create(result.value)
    return SubmissionResponse(id=request.id, message="Training request submitted successfully")


@admin_router.get("/training-requests", response_model=list[TrainingRequest])
def list_training_requests(service: TrainingRequestServiceDep):
    return service.list_all()


@admin_router.patch("/training-requests/{request_id}", response_model=TrainingRequest)
def update_training_request_status(
    request_id: Annotated[int, Path(description="Training request ID")],
    body: JsonBody,
    service: TrainingRequestServiceDep,
) -> Any:
    result = validate_payload(TrainingRequestStatusUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    updated = service.update_status(request_id, result.value.status)
    if not updated:
        raise RecordNotFoundError(NOT_FOUND, request_id)
    return updated
