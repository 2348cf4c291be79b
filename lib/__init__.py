# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory and PostgREST error helpers
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import (
    NO_ROWS_CODE,
    SupabaseClientError,
    create_supabase_client,
    is_no_rows_error,
)

__all__ = [
    "NO_ROWS_CODE",
    "SupabaseClientError",
    "create_supabase_client",
    "is_no_rows_error",
]
