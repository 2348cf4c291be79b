# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Shared-password admin gate.
#
# Usage:
#   from app.auth import AdminRequired, IsAdmin
#
#   @router.delete("/{item_id}", dependencies=[AdminRequired])
#   def delete_item(item_id: int): ...
# =============================================================================

from app.auth.dependencies import AdminRequired, IsAdmin, is_admin, require_admin
from app.auth.tokens import is_admin_header, issue_admin_token

__all__ = [
    "AdminRequired",
    "IsAdmin",
    "is_admin",
    "require_admin",
    "is_admin_header",
    "issue_admin_token",
]
