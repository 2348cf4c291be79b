# =============================================================================
# core/models/base.py - Shared Model Bases
# =============================================================================
# Wire format is camelCase (fullName, isPublished); Python attributes and
# database columns are snake_case. Every portal model inherits this mapping.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Loose shape check for contact emails; deliverability is not our concern
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelModel(BaseModel):
    """Base model accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_row(self, partial: bool = False) -> dict:
        """
        Dump to a snake_case dict ready for a table insert/update.

        Args:
            partial: Only include fields the client actually sent
        """
        return self.model_dump(mode="json", exclude_unset=partial)


class RecordModel(CamelModel):
    """A persisted row: integer surrogate key plus creation timestamp."""

    id: int = Field(..., description="Surrogate record identifier")
    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the record was created"
    )


class SubmissionResponse(BaseModel):
    """Acknowledgement returned by public submission endpoints."""
    id: int
    message: str


def reject_null(value):
    """Field validator for partial updates: omitted is fine, explicit null is not."""
    if value is None:
        raise ValueError("must not be null")
    return value
