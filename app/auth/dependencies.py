# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides the admin gate as a dependency so routes declare it instead of
# repeating the check inline.
#
# Usage:
#   from app.auth import AdminRequired
#
#   @router.get("/protected", dependencies=[AdminRequired])
#   def protected():
#       ...
#
# Route-level dependencies run before the endpoint's own parameters, so the
# gate rejects a request before its body is read or the data store touched.
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends, Header

from app.auth.tokens import is_admin_header
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def is_admin(
    authorization: Annotated[str | None, Header()] = None,
) -> bool:
    """
    Non-raising admin check.

    Useful for endpoints that serve both the public and admins, with
    different output for each.
    """
    return is_admin_header(authorization)


def require_admin(
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    """
    Reject the request unless it carries an admin token.

    Raises:
        UnauthorizedError: 401 {"message": "Unauthorized"}. Missing, malformed
            and wrong-marker tokens all produce the same response.
    """
    if not is_admin_header(authorization):
        logger.debug("Rejected request without a valid admin token")
        raise UnauthorizedError()


AdminRequired = Depends(require_admin)
IsAdmin = Annotated[bool, Depends(is_admin)]
