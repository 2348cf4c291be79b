# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The app factory receives a Settings instance and stores it on app.state;
# route code reads it through app.dependencies.get_app_settings.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # Database (PostgREST) and Storage API share the project URL and key

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
    )

    # -------------------------------------------------------------------------
    # Object Storage
    # -------------------------------------------------------------------------

    STORAGE_BUCKET_ID: str | None = Field(
        default=None,
        description="Bucket holding uploaded assets. Uploads fail and deletes "
                    "are skipped while this is unset."
    )

    STORAGE_CACHE_MAX_AGE: int = Field(
        default=31536000,
        ge=0,
        description="Cache-Control max-age (seconds) for stored and served objects"
    )

    LEGACY_UPLOAD_DIR: str = Field(
        default="client/public/uploads",
        description="Local directory served at /uploads for pre-bucket assets"
    )

    # -------------------------------------------------------------------------
    # Admin Access
    # -------------------------------------------------------------------------

    ADMIN_PASSWORD: str = Field(
        default="admin123",
        description="Shared admin password exchanged for a bearer token"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:5000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=100,
        ge=1,
        le=500,
        description="Maximum file upload size in MB"
    )

    ALLOWED_MIME_TYPES: str = Field(
        default=(
            "image/jpeg,image/png,image/webp,video/mp4,video/webm,application/pdf,"
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document,"
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        ),
        description="Accepted upload MIME types (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:5000, https://myapp.com" -> ["http://localhost:5000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def allowed_mime_types_list(self) -> list[str]:
        """Parse ALLOWED_MIME_TYPES into a list of lowercase MIME types."""
        return [
            mime.strip().lower()
            for mime in self.ALLOWED_MIME_TYPES.split(",")
            if mime.strip()
        ]

    @property
    def max_upload_size_bytes(self) -> int:
        """Convert MB to bytes for file size validation."""
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def storage_url(self) -> str:
        """Base URL of the Supabase Storage REST API."""
        return f"{self.SUPABASE_URL.rstrip('/')}/storage/v1"

    @property
    def storage_configured(self) -> bool:
        return bool(self.STORAGE_BUCKET_ID)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
