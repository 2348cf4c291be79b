# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds the app with an in-memory Supabase stand-in and a mocked
#   Storage REST endpoint, so no test touches the network
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app, which loads settings on import

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.auth import issue_admin_token
from app.config import Settings
from app.main import create_app
from core.services import ObjectStorage
from tests.fakes import FakeSupabase, storage_transport

BUCKET_ID = "test-bucket"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings(tmp_path):
    """Settings with a configured bucket and a throwaway legacy upload dir."""
    return Settings(
        SUPABASE_URL="https://test-project.supabase.co",
        SUPABASE_SERVICE_KEY="test-service-key",
        STORAGE_BUCKET_ID=BUCKET_ID,
        ADMIN_PASSWORD="admin123",
        LEGACY_UPLOAD_DIR=str(tmp_path / "uploads"),
        MAX_UPLOAD_SIZE_MB=1,
    )


@pytest.fixture
def fake_db():
    """Empty in-memory Supabase client."""
    return FakeSupabase()


@pytest.fixture
def object_storage(fake_db, settings):
    """ObjectStorage wired to the fake bucket and a mocked read endpoint."""
    http = httpx.AsyncClient(transport=storage_transport(fake_db.storage, BUCKET_ID))
    return ObjectStorage(
        client=fake_db,
        http=http,
        bucket_id=settings.STORAGE_BUCKET_ID,
        storage_url=settings.storage_url,
        service_key=settings.SUPABASE_SERVICE_KEY,
        cache_max_age=settings.STORAGE_CACHE_MAX_AGE,
    )


@pytest.fixture
def client(settings, fake_db, object_storage):
    """TestClient over an app built from the fakes above."""
    app = create_app(settings=settings, db=fake_db, object_storage=object_storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {issue_admin_token()}"}


@pytest.fixture
def published_job(fake_db):
    """One published job posting row."""
    return fake_db.seed(
        "job_postings",
        title="ICU Nurse",
        company="St. Mary's",
        location="Lagos",
        employment_type="Full-time",
        description="Night shifts, 12h rotation",
        requirements=None,
        salary_range=None,
        is_published=True,
    )
