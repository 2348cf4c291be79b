# =============================================================================
# core/models/service_request.py - Service Request Schemas
# =============================================================================
# A service request is a public "contact us about service X" submission.
# Admins move it through: pending -> reviewed -> approved | rejected
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import EMAIL_PATTERN, CamelModel, RecordModel


class ServiceRequestStatus(str, Enum):
    """Review state of a service request."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    APPROVED = "approved"
    REJECTED = "rejected"


class ServiceRequestCreate(CamelModel):
    """
    Public submission body.

    Example:
        {
            "fullName": "Ada Obi",
            "email": "ada@example.com",
            "phone": "+2348000000000",
            "serviceType": "Candidate Verification",
            "message": "We need 5 nurses verified"
        }
    """

    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)
    phone: str = Field(..., min_length=1, max_length=50)
    company_name: str | None = Field(default=None, max_length=200)
    service_type: str = Field(..., min_length=1, max_length=200)
    message: str | None = Field(default=None, max_length=5000)


class ServiceRequestStatusUpdate(CamelModel):
    """Admin status transition body."""
    status: ServiceRequestStatus


class ServiceRequest(RecordModel):
    """A stored service request."""
    full_name: str
    email: str
    phone: str
    company_name: str | None = None
    service_type: str
    message: str | None = None
    status: ServiceRequestStatus = ServiceRequestStatus.PENDING
