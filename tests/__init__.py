# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Talent Portal API:
# - fakes.py: In-memory Supabase client and mocked Storage read endpoint
# - test_models.py, test_validation.py, test_tokens.py: Unit tests
# - test_storage_service.py: Object key scheme, uploads, reads, deletes
# - test_api_*.py: Integration tests through the FastAPI TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
