# =============================================================================
# core/services/candidate_service.py - Verified Candidate Persistence
# =============================================================================

from core.models.candidate import (
    CandidateStatus,
    VerifiedCandidate,
    VerifiedCandidateCreate,
)
from core.services.base import TableService


class CandidateService(TableService[VerifiedCandidate]):
    """Verified candidate showcase entries."""

    table = "verified_candidates"
    record_model = VerifiedCandidate

    def list_approved(self) -> list[VerifiedCandidate]:
        return self._select({"status": CandidateStatus.APPROVED.value})

    def list_all(self) -> list[VerifiedCandidate]:
        return self._select()

    def create(self, data: VerifiedCandidateCreate) -> VerifiedCandidate:
        return self._insert(data.to_row())

    def update_status(
        self,
        candidate_id: int,
        status: CandidateStatus,
    ) -> VerifiedCandidate | None:
        return self._update(candidate_id, {"status": status.value})
