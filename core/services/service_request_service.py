# =============================================================================
# core/services/service_request_service.py - Service Request Persistence
# =============================================================================

from core.models.service_request import (
    ServiceRequest,
    ServiceRequestCreate,
    ServiceRequestStatus,
)
from core.services.base import TableService


class ServiceRequestService(TableService[ServiceRequest]):
    """Service requests submitted from the public contact form."""

    table = "service_requests"
    record_model = ServiceRequest

    def create(self, data: ServiceRequestCreate) -> ServiceRequest:
        row = data.to_row()
        row["status"] = ServiceRequestStatus.PENDING.value
        return self._insert(row)

    def list_all(self) -> list[ServiceRequest]:
        return self._select()

    def get(self, request_id: int) -> ServiceRequest | None:
        return self._select_one(request_id)

    def update_status(
        self,
        request_id: int,
        status: ServiceRequestStatus,
    ) -> ServiceRequest | None:
        return self._update(request_id, {"status": status.value})
