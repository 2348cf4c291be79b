# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - base.py: camelCase wire mapping, record base
# - service_request.py, content.py, candidate.py, template.py,
#   job.py, training.py: one module per stored entity
# - storage.py: upload results and object read streams
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel, RecordModel, SubmissionResponse

from .service_request import (
    ServiceRequest,
    ServiceRequestCreate,
    ServiceRequestStatus,
    ServiceRequestStatusUpdate,
)

from .content import (
    ContentItem,
    ContentItemCreate,
    ContentItemUpdate,
    ContentType,
    ContentUploadForm,
)

from .candidate import (
    CandidateStatus,
    CandidateStatusUpdate,
    CandidateUploadForm,
    VerifiedCandidate,
    VerifiedCandidateCreate,
)

from .template import (
    Template,
    TemplateCreate,
    TemplateFileType,
    TemplatePublishUpdate,
    TemplateUploadForm,
)

from .job import (
    JobApplication,
    JobApplicationCreate,
    JobApplicationForm,
    JobPosting,
    JobPostingCreate,
    JobPostingUpdate,
)

from .training import (
    TrainingRequest,
    TrainingRequestCreate,
    TrainingRequestStatus,
    TrainingRequestStatusUpdate,
)

from .storage import ObjectStream, UploadResult

__all__ = [
    # Base
    "CamelModel",
    "RecordModel",
    "SubmissionResponse",
    # Service requests
    "ServiceRequest",
    "ServiceRequestCreate",
    "ServiceRequestStatus",
    "ServiceRequestStatusUpdate",
    # Content
    "ContentItem",
    "ContentItemCreate",
    "ContentItemUpdate",
    "ContentType",
    "ContentUploadForm",
    # Candidates
    "CandidateStatus",
    "CandidateStatusUpdate",
    "CandidateUploadForm",
    "VerifiedCandidate",
    "VerifiedCandidateCreate",
    # Templates
    "Template",
    "TemplateCreate",
    "TemplateFileType",
    "TemplatePublishUpdate",
    "TemplateUploadForm",
    # Jobs
    "JobApplication",
    "JobApplicationCreate",
    "JobApplicationForm",
    "JobPosting",
    "JobPostingCreate",
    "JobPostingUpdate",
    # Training
    "TrainingRequest",
    "TrainingRequestCreate",
    "TrainingRequestStatus",
    "TrainingRequestStatusUpdate",
    # Storage
    "ObjectStream",
    "UploadResult",
]
