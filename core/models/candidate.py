# =============================================================================
# core/models/candidate.py - Verified Candidate Schemas
# =============================================================================
# Verified candidates are showcased publicly once approved.
# Flow: pending -> approved | rejected
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import CamelModel, RecordModel

DEFAULT_SERVICE = "Candidate Verification"


class CandidateStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VerifiedCandidateCreate(CamelModel):
    """Admin JSON create body."""
    full_name: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(default="", max_length=200)
    bio: str = Field(..., min_length=1, max_length=5000)
    service: str = Field(default=DEFAULT_SERVICE, max_length=200)
    image_url: str | None = None
    status: CandidateStatus = CandidateStatus.PENDING


class CandidateUploadForm(CamelModel):
    """Text fields accompanying a multipart candidate photo upload."""
    full_name: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(default="", max_length=200)
    bio: str = Field(..., min_length=1, max_length=5000)
    service: str = Field(default=DEFAULT_SERVICE, max_length=200)
    status: CandidateStatus = CandidateStatus.PENDING


class CandidateStatusUpdate(CamelModel):
    status: CandidateStatus


class VerifiedCandidate(RecordModel):
    """A stored verified candidate."""
    full_name: str
    title: str
    company: str = ""
    bio: str
    service: str = DEFAULT_SERVICE
    image_url: str | None = None
    status: CandidateStatus = CandidateStatus.PENDING
