# =============================================================================
# app/routers/service_requests.py - Service Request Endpoints
# =============================================================================
# Public submission, admin review.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, status

from app.auth import AdminRequired
from app.dependencies import JsonBody, ServiceRequestServiceDep
from app.exceptions import RecordNotFoundError
from core.models import (
    ServiceRequest,
    ServiceRequestCreate,
    ServiceRequestStatusUpdate,
    SubmissionResponse,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Request"


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubmissionResponse)
def submit_service_request(body: JsonBody, service: ServiceRequestServiceDep) -> Any:
    """
    Submit a service request from the public site.

    Returns the new record ID with a confirmation message.
    """
    result = validate_payload(ServiceRequestCreate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    request = service.create(result.value)
    return SubmissionResponse(id=request.id, message="Request submitted successfully")


@router.get("", response_model=list[ServiceRequest], dependencies=[AdminRequired])
def list_service_requests(service: ServiceRequestServiceDep):
    return service.list_all()


@router.get("/{request_id}", response_model=ServiceRequest, dependencies=[AdminRequired])
def get_service_request(
    request_id: Annotated[int, Path(description="Service request ID")],
    service: ServiceRequestServiceDep,
):
    request = service.get(request_id)
    if not request:
        raise RecordNotFoundError(NOT_FOUND, request_id)
    return request


@router.patch("/{request_id}", response_model=ServiceRequest, dependencies=[AdminRequired])
def update_service_request_status(
    request_id: Annotated[int, Path(description="Service request ID")],
    body: JsonBody,
    service: ServiceRequestServiceDep,
) -> Any:
    """Move a request to a new review status."""
    result = validate_payload(ServiceRequestStatusUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()

    updated = service.update_status(request_id, result.value.status)
    if not updated:
        raise RecordNotFoundError(NOT_FOUND, request_id)
    return updated
