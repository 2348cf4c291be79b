# =============================================================================
# app/routers/jobs.py - Job Posting & Application Endpoints
# =============================================================================
# Two routers:
#   router        - public: /api/jobs, /api/jobs/{id}, /api/jobs/apply
#   admin_router  - admin:  /api/admin/jobs..., /api/admin/job-applications
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, Response, status

from app.auth import AdminRequired
from app.dependencies import (
    FormBody,
    JobApplicationServiceDep,
    JobServiceDep,
    JsonBody,
    ObjectStorageDep,
    SettingsDep,
)
from app.exceptions import NoFileUploadedError, RecordNotFoundError
from app.uploads import read_upload
from core.models import (
    JobApplication,
    JobApplicationCreate,
    JobApplicationForm,
    JobPosting,
    JobPostingCreate,
    JobPostingUpdate,
)
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter(dependencies=[AdminRequired])

NOT_FOUND = "Job"


# =============================================================================
# Public
# =============================================================================

@router.get("/jobs", response_model=list[JobPosting])
def list_published_jobs(service: JobServiceDep):
    return service.list_published()


@router.post(
    "/jobs/apply",
    status_code=status.HTTP_201_CREATED,
    response_model=JobApplication,
)
def apply_for_job(
    form: FormBody,
    jobs: JobServiceDep,
    applications: JobApplicationServiceDep,
    storage: ObjectStorageDep,
    settings: SettingsDep,
) -> Any:
    """
    Submit an application with a CV.

    Expects multipart with a `cv` file part plus the JobApplicationForm
    fields. The job must exist before anything is uploaded, so a bad
    `jobId` never leaves an orphaned CV in the bucket.
    """
    upload = form.first_file("cv")
    if upload is None:
        raise NoFileUploadedError("CV is required")

    result = validate_payload(JobApplicationForm, form.fields)
    if isinstance(result, Invalid):
        return result.to_response()
    fields = result.value

    if not jobs.get(fields.job_id):
        raise RecordNotFoundError(NOT_FOUND, fields.job_id)

    content = read_upload(upload, settings)
    stored = storage.upload(content, upload.filename, upload.content_type, "applications")

    application = JobApplicationCreate(
        **fields.model_dump(),
        cv_file_name=stored.filename,
        cv_url=stored.url,
    )
    return applications.create(application)


@router.get("/jobs/{job_id}", response_model=JobPosting)
def get_job(
    job_id: Annotated[int, Path(description="Job posting ID")],
    service: JobServiceDep,
):
    job = service.get(job_id)
    if not job:
        raise RecordNotFoundError(NOT_FOUND, job_id)
    return job


# =============================================================================
# Admin
# =============================================================================

@admin_router.get("/jobs", response_model=list[JobPosting])
def list_all_jobs(service: JobServiceDep):
    return service.list_all()


@admin_router.post("/jobs", status_code=status.HTTP_201_CREATED, response_model=JobPosting)
def create_job(body: JsonBody, service: JobServiceDep) -> Any:
    result = validate_payload(JobPostingCreate, body)
    if isinstance(result, Invalid):
        return result.to_response()
    return service.create(result.value)


@admin_router.patch("/jobs/{job_id}", response_model=JobPosting)
def update_job(
    job_id: Annotated[int, Path(description="Job posting ID")],
    body: JsonBody,
    service: JobServiceDep,
) -> Any:
    """
    Update a job posting.

    A body of only `{"isPublished": bool}` toggles visibility; anything else
    is applied as a partial update of the fields sent.
    """
    result = validate_payload(JobPostingUpdate, body)
    if isinstance(result, Invalid):
        return result.to_response()
    update = result.value

    sent = update.model_fields_set
    if not sent:
        return Invalid(message="No fields to update").to_response()

    if sent == {"is_published"}:
        updated = service.update_status(job_id, update.is_published)
    else:
        updated = service.update(job_id, update)

    if not updated:
        raise RecordNotFoundError(NOT_FOUND, job_id)
    return updated


@admin_router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: Annotated[int, Path(description="Job posting ID")],
    service: JobServiceDep,
):
    service.delete(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_router.get("/job-applications", response_model=list[JobApplication])
def list_job_applications(service: JobApplicationServiceDep):
    return service.list_all()
