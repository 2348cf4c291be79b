# =============================================================================
# core/models/job.py - Job Posting & Application Schemas
# =============================================================================
# Job postings are managed by admins and listed publicly once published.
# Applications are public submissions that reference a posting by ID and
# carry the uploaded CV's generated filename and /storage URL.
# =============================================================================

from pydantic import Field, field_validator

from .base import EMAIL_PATTERN, CamelModel, RecordModel, reject_null


# =============================================================================
# Job Postings
# =============================================================================

class JobPostingCreate(CamelModel):
    """
    Admin create body.

    Example:
        {
            "title": "ICU Nurse",
            "location": "Lagos",
            "employmentType": "Full-time",
            "description": "Night shifts, 12h rotation",
            "isPublished": true
        }
    """

    title: str = Field(..., min_length=1, max_length=300)
    company: str | None = Field(default=None, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    employment_type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    requirements: str | None = None
    salary_range: str | None = Field(default=None, max_length=100)
    is_published: bool = False


class JobPostingUpdate(CamelModel):
    """Admin partial update body; `{"isPublished": bool}` alone toggles visibility."""
    title: str | None = Field(default=None, min_length=1, max_length=300)
    company: str | None = Field(default=None, max_length=200)
    location: str | None = Field(default=None, min_length=1, max_length=200)
    employment_type: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1)
    requirements: str | None = None
    salary_range: str | None = Field(default=None, max_length=100)
    is_published: bool | None = None

    check_not_null = field_validator(
        "title", "location", "employment_type", "description", "is_published"
    )(reject_null)


class JobPosting(RecordModel):
    """A stored job posting."""
    title: str
    company: str | None = None
    location: str
    employment_type: str
    description: str
    requirements: str | None = None
    salary_range: str | None = None
    is_published: bool = False


# =============================================================================
# Job Applications
# =============================================================================

class JobApplicationForm(CamelModel):
    """Text fields accompanying the multipart CV upload."""
    job_id: int = Field(..., ge=1)
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)
    phone: str = Field(..., min_length=1, max_length=50)
    state: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    cover_note: str = Field(default="", max_length=5000)


class JobApplicationCreate(JobApplicationForm):
    """Internal create payload, built after the CV has been stored."""
    cv_file_name: str
    cv_url: str


class JobApplication(RecordModel):
    """A stored job application."""
    job_id: int
    full_name: str
    email: str
    phone: str
    state: str
    city: str
    cv_file_name: str
    cv_url: str
    cover_note: str = ""
