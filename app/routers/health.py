# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
#   /api/health        static status, environment and version
#   /api/health/ready  probes the job_postings table and the configured bucket
#   /api/health/live   process is up
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import DbDep, ObjectStorageDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "1.0.0"

# Any portal table will do; job postings always exist once the schema is loaded
PROBE_TABLE = "job_postings"


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class DependencyChecks(BaseModel):
    """Outcome per backing service: "healthy", "not configured" or "unhealthy: ..."."""
    database: str
    storage: str


class ReadinessResponse(BaseModel):
    status: str
    checks: DependencyChecks
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _check_database(db) -> str:
    try:
        db.table(PROBE_TABLE).select("id").limit(1).execute()
    except Exception as e:
        logger.warning(f"Database check failed: {e}")
        return f"unhealthy: {str(e)[:50]}"
    return "healthy"


@router.get("/health", response_model=HealthResponse)
def health_check(settings: SettingsDep):
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(db: DbDep, storage: ObjectStorageDep):
    """
    Report "ready" only when both the data store and STORAGE_BUCKET_ID's
    bucket answer; anything else is "degraded" with per-check detail.
    """
    checks = DependencyChecks(
        database=_check_database(db),
        storage=storage.check_bucket(),
    )
    ready = checks.database == "healthy" and checks.storage == "healthy"

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
def liveness_check():
    return LivenessResponse(status="alive", timestamp=_now())
