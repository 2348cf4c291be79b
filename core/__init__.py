# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the logic behind the HTTP routes:
# - models/: Pydantic schemas for data validation
# - services/: one persistence service per table, plus ObjectStorage
# - validation.py: typed payload checking (Valid / Invalid)
#
# Services receive their Supabase / httpx handles explicitly, so tests can
# pass in substitutes.
# =============================================================================
