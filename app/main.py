# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Talent Portal API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#
# Tests build their own app with injected handles:
#   app = create_app(settings=..., db=fake_db, object_storage=storage)
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import Client

from app.auth import routes as auth_routes
from app.config import Settings, get_settings
from app.exceptions import (
    PortalException,
    http_exception_handler,
    portal_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    candidates,
    content,
    health,
    jobs,
    service_requests,
    storage,
    templates,
    training,
)
from core.services import ObjectStorage
from lib.supabase_client import create_supabase_client

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(
    settings: Settings | None = None,
    db: Client | None = None,
    object_storage: ObjectStorage | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; loaded from the environment when omitted
        db: Supabase client; created at startup when omitted
        object_storage: Bucket adapter; created at startup when omitted

    Handles passed in are used as-is and never closed by the app.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Runs on startup and shutdown:
        - Startup: Build the Supabase client and bucket adapter if not injected
        - Shutdown: Close the HTTP client used for object reads
        """
        logger.info(f"Starting Talent Portal API in {settings.ENVIRONMENT} mode")
        logger.info(f"CORS origins: {settings.cors_origins_list}")

        http_client = None
        if app.state.db is None:
            app.state.db = create_supabase_client(
                settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY
            )
        if app.state.object_storage is None:
            http_client = httpx.AsyncClient(timeout=httpx.Timeout(30.0, read=None))
            app.state.object_storage = ObjectStorage(
                client=app.state.db,
                http=http_client,
                bucket_id=settings.STORAGE_BUCKET_ID,
                storage_url=settings.storage_url,
                service_key=settings.SUPABASE_SERVICE_KEY,
                cache_max_age=settings.STORAGE_CACHE_MAX_AGE,
            )

        if not settings.storage_configured:
            logger.warning("STORAGE_BUCKET_ID is not set; uploads will fail")

        yield

        logger.info("Shutting down Talent Portal API")
        if http_client is not None:
            await http_client.aclose()

    app = FastAPI(
        title="Talent Portal API",
        description="""
## Recruitment & Training Portal API

Backs the public portal site and its admin dashboard.

### Public

- Submit service and training requests
- Browse published content, templates, jobs and verified candidates
- Apply for a job with a CV upload
- Download stored files from `/storage/<folder>/<filename>`

### Admin

Exchange the admin password at `POST /api/admin/login` for a bearer token,
then send `Authorization: Bearer <token>` to manage every collection.
""",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Auth", "description": "Admin login and token check"},
            {"name": "Service Requests", "description": "Employer service requests"},
            {"name": "Content", "description": "News, videos and gallery items"},
            {"name": "Candidates", "description": "Verified candidate showcase"},
            {"name": "Templates", "description": "Downloadable document templates"},
            {"name": "Jobs", "description": "Job postings and applications"},
            {"name": "Training", "description": "Training requests"},
            {"name": "Storage", "description": "Stored file serving"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )

    app.state.settings = settings
    app.state.db = db
    app.state.object_storage = object_storage

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        """Log one line per /api request with status and duration."""
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} in {duration_ms:.0f}ms"
            )
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(PortalException, portal_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(status_code=500, content={"message": "Server error"})

    # =========================================================================
    # Routers
    # =========================================================================

    # Admin login and token check
    app.include_router(auth_routes.router, prefix="/api/admin", tags=["Auth"])

    app.include_router(
        service_requests.router,
        prefix="/api/service-requests",
        tags=["Service Requests"]
    )

    app.include_router(content.router, prefix="/api/content", tags=["Content"])

    app.include_router(
        candidates.router,
        prefix="/api/verified-candidates",
        tags=["Candidates"]
    )

    app.include_router(templates.router, prefix="/api/templates", tags=["Templates"])

    # Jobs: public listing/apply plus the admin management surface
    app.include_router(jobs.router, prefix="/api", tags=["Jobs"])
    app.include_router(jobs.admin_router, prefix="/api/admin", tags=["Jobs"])

    app.include_router(training.router, prefix="/api", tags=["Training"])
    app.include_router(training.admin_router, prefix="/api/admin", tags=["Training"])

    # Stored objects and legacy local uploads
    app.include_router(storage.router, prefix="/storage", tags=["Storage"])
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.LEGACY_UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    app.include_router(health.router, prefix="/api", tags=["Health"])

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Talent Portal API",
            "version": VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.API_HOST, port=_settings.API_PORT)
