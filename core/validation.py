# =============================================================================
# core/validation.py - Request Shape Checking
# =============================================================================
# Validates an untrusted payload against a pydantic model and returns a typed
# result instead of raising, so handlers branch on the outcome explicitly:
#
#   result = validate_payload(JobPostingCreate, body)
#   if isinstance(result, Invalid):
#       return result.to_response()
#   job = service.create(result.value)
# =============================================================================

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    """Payload matched the model."""
    value: ModelT


@dataclass(frozen=True)
class Invalid:
    """Payload failed; carries the first error only."""
    message: str
    field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=400, content=self.to_dict())


ValidationResult = Union[Valid[ModelT], Invalid]


def validate_payload(model: type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """
    Check `data` against `model`.

    Args:
        model: Pydantic model describing the expected shape
        data: Decoded JSON body or form fields (None if the body was unreadable)

    Returns:
        Valid(instance) on success, otherwise Invalid(message, field) describing
        the first offending field by its wire (camelCase) name.
    """
    if not isinstance(data, dict):
        return Invalid(message="Expected a JSON object")

    try:
        return Valid(model.model_validate(data))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        return Invalid(message=first.get("msg", "Invalid value"), field=field)
