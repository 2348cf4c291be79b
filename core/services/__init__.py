# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .base import TableService
from .candidate_service import CandidateService
from .content_service import ContentService
from .job_service import JobApplicationService, JobService
from .service_request_service import ServiceRequestService
from .storage_service import ObjectStorage
from .template_service import TemplateService
from .training_service import TrainingRequestService

__all__ = [
    "TableService",
    "CandidateService",
    "ContentService",
    "JobApplicationService",
    "JobService",
    "ServiceRequestService",
    "ObjectStorage",
    "TemplateService",
    "TrainingRequestService",
]
