# =============================================================================
# core/services/training_service.py - Training Request Persistence
# =============================================================================

from core.models.training import (
    TrainingRequest,
    TrainingRequestCreate,
    TrainingRequestStatus,
)
from core.services.base import TableService


class TrainingRequestService(TableService[TrainingRequest]):

    table = "training_requests"
    record_model = TrainingRequest

    def create(self, data: TrainingRequestCreate) -> TrainingRequest:
        row = data.to_row()
        row["status"] = TrainingRequestStatus.NEW.value
        return self._insert(row)

    def list_all(self) -> list[TrainingRequest]:
        return self._select()

    def update_status(
        self,
        request_id: int,
        status: TrainingRequestStatus,
    ) -> TrainingRequest | None:
        return self._update(request_id, {"status": status.value})
