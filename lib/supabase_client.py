# =============================================================================
# lib/supabase_client.py - Supabase Client Factory
# =============================================================================
# Builds the Supabase client used for both the relational store (PostgREST
# tables) and the object-storage bucket.
#
# The client is constructed once at startup by the app factory and handed to
# services explicitly; nothing here keeps a module-level instance.
#
# Usage:
#   from lib.supabase_client import create_supabase_client
#   client = create_supabase_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST error code for ".single()" matching zero rows
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error while creating or talking to the Supabase client.

    Provides actionable error messages: tell HOW to fix, not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def create_supabase_client(url: str, service_key: str) -> Client:
    """
    Create a Supabase client.

    Uses the service_role key which bypasses Row Level Security (RLS).
    This is appropriate for server-side operations.

    Args:
        url: Supabase project URL
        service_key: service_role API key

    Returns:
        Client: Supabase client instance

    Raises:
        SupabaseClientError: If client creation fails
    """
    try:
        client = create_client(url, service_key)
    except Exception as e:
        raise SupabaseClientError(
            message=f"Failed to create Supabase client: {e}",
            code="CLIENT_INIT_FAILED",
            suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
        )
    logger.info("Supabase client initialized successfully")
    return client


def is_no_rows_error(error: Exception) -> bool:
    """Check whether a PostgREST error means "no matching row"."""
    return NO_ROWS_CODE in str(error)
