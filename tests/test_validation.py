# =============================================================================
# tests/test_validation.py - Payload Validation Tests
# =============================================================================
# Run with: poetry run pytest tests/test_validation.py -v
# =============================================================================

import json

from core.models import JobPostingCreate, ServiceRequestCreate, TrainingRequestCreate
from core.validation import Invalid, Valid, validate_payload


class TestValidatePayload:
    """Tests for validate_payload()."""

    def test_valid_payload_returns_model(self):
        # Arrange
        body = {
            "fullName": "Ada Obi",
            "email": "ada@example.com",
            "phone": "+2348000000000",
            "serviceType": "Recruitment",
        }

        # Act
        result = validate_payload(ServiceRequestCreate, body)

        # Assert
        assert isinstance(result, Valid)
        assert result.value.full_name == "Ada Obi"
        assert result.value.company_name is None

    def test_missing_field_reports_wire_name(self):
        result = validate_payload(ServiceRequestCreate, {"email": "ada@example.com"})

        assert isinstance(result, Invalid)
        assert result.field == "fullName"

    def test_bad_email_reports_field(self):
        body = {
            "fullName": "Ada Obi",
            "email": "not-an-email",
            "phone": "1",
            "interestedTraining": "Phlebotomy",
        }

        result = validate_payload(TrainingRequestCreate, body)

        assert isinstance(result, Invalid)
        assert result.field == "email"

    def test_non_object_payload(self):
        for body in (None, [], "text", 3):
            result = validate_payload(JobPostingCreate, body)

            assert result == Invalid(message="Expected a JSON object")

    def test_to_response_is_400_with_message_and_field(self):
        response = Invalid(message="Field required", field="title").to_response()

        assert response.status_code == 400
        assert json.loads(response.body) == {"message": "Field required", "field": "title"}

    def test_to_dict_omits_missing_field(self):
        assert Invalid(message="Expected a JSON object").to_dict() == {
            "message": "Expected a JSON object"
        }
