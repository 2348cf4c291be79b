# =============================================================================
# core/models/training.py - Training Request Schemas
# =============================================================================
# Flow: new -> reviewed -> contacted
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import EMAIL_PATTERN, CamelModel, RecordModel


class TrainingRequestStatus(str, Enum):
    NEW = "new"
    REVIEWED = "reviewed"
    CONTACTED = "contacted"


class TrainingRequestCreate(CamelModel):
    """Public submission body."""
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)
    phone: str = Field(..., min_length=1, max_length=50)
    employment_status: str | None = Field(default=None, max_length=100)
    organization_name: str | None = Field(default=None, max_length=200)
    role: str | None = Field(default=None, max_length=200)
    interested_training: str = Field(..., min_length=1, max_length=300)
    preferred_start_date: str | None = Field(default=None, max_length=50)
    certification_required: bool = False
    verified_shortlist: bool = False


class TrainingRequestStatusUpdate(CamelModel):
    status: TrainingRequestStatus


class TrainingRequest(RecordModel):
    """A stored training request."""
    full_name: str
    email: str
    phone: str
    employment_status: str | None = None
    organization_name: str | None = None
    role: str | None = None
    interested_training: str
    preferred_start_date: str | None = None
    certification_required: bool = False
    verified_shortlist: bool = False
    status: TrainingRequestStatus = TrainingRequestStatus.NEW
