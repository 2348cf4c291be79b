# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - service_requests.py: Employer service requests
# - content.py: News, video and gallery items (with uploads)
# - candidates.py: Verified candidate showcase (with photo uploads)
# - templates.py: Downloadable templates (with document uploads)
# - jobs.py: Job postings, applications and CV uploads
# - training.py: Training requests
# - storage.py: Streaming reads of stored objects
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import candidates
from . import content
from . import health
from . import jobs
from . import service_requests
from . import storage
from . import templates
from . import training

__all__ = [
    "candidates",
    "content",
    "health",
    "jobs",
    "service_requests",
    "storage",
    "templates",
    "training",
]
