# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Admin password login and bearer-token gate
# - routers/: API endpoint definitions organized by feature
# - uploads.py: MIME and size checks for multipart file parts
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence and storage to the core/ package.
# =============================================================================
