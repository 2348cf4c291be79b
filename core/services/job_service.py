# =============================================================================
# core/services/job_service.py - Job Posting & Application Persistence
# =============================================================================

from core.models.job import (
    JobApplication,
    JobApplicationCreate,
    JobPosting,
    JobPostingCreate,
    JobPostingUpdate,
)
from core.services.base import TableService


class JobService(TableService[JobPosting]):
    """Job postings managed from the admin dashboard."""

    table = "job_postings"
    record_model = JobPosting

    def list_published(self) -> list[JobPosting]:
        return self._select({"is_published": True})

    def list_all(self) -> list[JobPosting]:
        return self._select()

    def get(self, job_id: int) -> JobPosting | None:
        return self._select_one(job_id)

    def create(self, data: JobPostingCreate) -> JobPosting:
        return self._insert(data.to_row())

    def update(self, job_id: int, data: JobPostingUpdate) -> JobPosting | None:
        return self._update(job_id, data.to_row(partial=True))

    def update_status(self, job_id: int, is_published: bool) -> JobPosting | None:
        return self._update(job_id, {"is_published": is_published})

    def delete(self, job_id: int) -> JobPosting | None:
        return self._delete(job_id)


class JobApplicationService(TableService[JobApplication]):
    """Applications submitted against a job posting."""

    table = "job_applications"
    record_model = JobApplication

    def create(self, data: JobApplicationCreate) -> JobApplication:
        return self._insert(data.to_row())

    def list_all(self) -> list[JobApplication]:
        return self._select()
