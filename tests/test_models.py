# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the portal models to ensure:
# - camelCase wire names map to snake_case attributes and columns
# - Invalid data raises ValidationError
# - Default values work as expected
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    CandidateStatus,
    ContentItem,
    ContentItemUpdate,
    ContentType,
    JobApplicationForm,
    JobPostingUpdate,
    ServiceRequest,
    TemplateUploadForm,
    TrainingRequestCreate,
    TrainingRequestStatus,
    VerifiedCandidateCreate,
)


# =============================================================================
# Wire Mapping
# =============================================================================

class TestCamelCaseMapping:
    """Tests for the shared camelCase/snake_case mapping."""

    def test_accepts_camel_case_keys(self):
        form = JobApplicationForm.model_validate({
            "jobId": "3",
            "fullName": "Ada Obi",
            "email": "ada@example.com",
            "phone": "0800",
            "state": "Lagos",
            "city": "Ikeja",
        })

        # Form fields arrive as strings; jobId is coerced
        assert form.job_id == 3
        assert form.cover_note == ""

    def test_accepts_snake_case_keys(self):
        candidate = VerifiedCandidateCreate(full_name="Ada Obi", title="RN", bio="ICU nurse")

        assert candidate.service == "Candidate Verification"
        assert candidate.status == CandidateStatus.PENDING

    def test_records_dump_camel_case(self):
        record = ServiceRequest.model_validate({
            "id": 1,
            "full_name": "Ada Obi",
            "email": "ada@example.com",
            "phone": "0800",
            "service_type": "Recruitment",
            "status": "reviewed",
        })

        dumped = record.model_dump(by_alias=True)

        assert dumped["fullName"] == "Ada Obi"
        assert dumped["serviceType"] == "Recruitment"

    def test_to_row_is_snake_case(self):
        row = TrainingRequestCreate(
            full_name="Ada Obi",
            email="ada@example.com",
            phone="0800",
            interested_training="Phlebotomy",
        ).to_row()

        assert row["interested_training"] == "Phlebotomy"
        assert row["certification_required"] is False

    def test_partial_row_only_has_sent_fields(self):
        update = ContentItemUpdate.model_validate({"isPublished": True})

        assert update.to_row(partial=True) == {"is_published": True}


# =============================================================================
# Field Rules
# =============================================================================

class TestFieldRules:
    """Tests for per-field constraints."""

    def test_job_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            JobApplicationForm(
                job_id=0,
                full_name="Ada",
                email="ada@example.com",
                phone="1",
                state="Lagos",
                city="Ikeja",
            )

    def test_unknown_content_type_rejected(self):
        with pytest.raises(ValidationError):
            ContentItemUpdate.model_validate({"type": "podcast"})

    def test_template_file_type_required(self):
        with pytest.raises(ValidationError):
            TemplateUploadForm.model_validate({"title": "Offer letter"})

    def test_training_status_values(self):
        assert [s.value for s in TrainingRequestStatus] == ["new", "reviewed", "contacted"]

    def test_empty_job_update_sets_nothing(self):
        assert JobPostingUpdate.model_validate({}).model_fields_set == set()


# =============================================================================
# Content Items
# =============================================================================

class TestContentItem:
    """Tests for ContentItem.stored_object_url."""

    def test_prefers_uploaded_url(self):
        item = ContentItem(
            id=1,
            type=ContentType.NEWS,
            title="Hiring",
            url="/storage/content/1-2.png",
            image_url="/storage/content/1-2.png",
        )

        assert item.stored_object_url == "/storage/content/1-2.png"

    def test_legacy_objects_url(self):
        item = ContentItem(id=1, type=ContentType.VIDEO, title="Tour", file_url="/objects/content/1-2.mp4")

        assert item.stored_object_url == "/objects/content/1-2.mp4"

    def test_external_url_is_not_stored(self):
        item = ContentItem(id=1, type=ContentType.GALLERY, title="Event", url="https://youtube.com/x")

        assert item.stored_object_url is None
