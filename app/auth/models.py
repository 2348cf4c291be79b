# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Admin login body."""
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Bearer token for subsequent admin calls."""
    token: str


class AuthStatusResponse(BaseModel):
    """Whether the presented token is an admin token."""
    authenticated: bool
