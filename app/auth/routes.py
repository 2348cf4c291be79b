# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Exchanges the shared admin password for a bearer token and reports whether
# a presented token is admin. There are no user accounts: one secret, one role.
# =============================================================================

import logging
import secrets
from typing import Any

from fastapi import APIRouter

from app.auth.dependencies import IsAdmin
from app.auth.models import AuthStatusResponse, LoginRequest, LoginResponse
from app.auth.tokens import issue_admin_token
from app.dependencies import JsonBody, SettingsDep
from app.exceptions import InvalidCredentialsError
from core.validation import Invalid, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(body: JsonBody, settings: SettingsDep) -> Any:
    """
    Exchange the admin password for a token.

    Returns:
        {"token": "<base64>"}

    Raises:
        400: If `password` is missing or not a string
        401: If the password doesn't match
    """
    result = validate_payload(LoginRequest, body)
    if isinstance(result, Invalid):
        return result.to_response()

    supplied = result.value.password.encode("utf-8")
    expected = settings.ADMIN_PASSWORD.encode("utf-8")
    if not secrets.compare_digest(supplied, expected):
        logger.warning("Admin login rejected")
        raise InvalidCredentialsError()

    logger.info("Admin token issued")
    return LoginResponse(token=issue_admin_token())


@router.get("/me", response_model=AuthStatusResponse)
def get_auth_status(authenticated: IsAdmin) -> AuthStatusResponse:
    """
    Report whether the current token is an admin token.

    Never returns 401; clients use this to decide whether to show the
    admin dashboard.
    """
    return AuthStatusResponse(authenticated=authenticated)
