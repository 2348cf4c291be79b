# =============================================================================
# app/auth/tokens.py - Admin Token Encoding
# =============================================================================
# An admin token is base64("admin:<epoch-ms>"). It is an opaque flag, not a
# credential: no signature, no expiry, no identity. Any header whose decoded
# token starts with the marker counts as admin.
# =============================================================================

import base64
import binascii
import time

ADMIN_MARKER = "admin:"
BEARER_PREFIX = "Bearer "


def issue_admin_token(now_ms: int | None = None) -> str:
    """Encode a fresh admin token stamped with the issue time."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return base64.b64encode(f"{ADMIN_MARKER}{now_ms}".encode("utf-8")).decode("ascii")


def decode_token(token: str) -> str | None:
    """
    Base64-decode a token to text.

    Missing padding is tolerated. Returns None instead of raising on
    non-ASCII input, bad base64 or non-UTF-8 payloads.
    """
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.b64decode(padded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


def is_admin_header(authorization: str | None) -> bool:
    """
    Decide whether an Authorization header value grants admin access.

    Accepts "Bearer <token>" or a bare token. Fails closed: an absent,
    empty or undecodable header is simply not admin.
    """
    if not authorization:
        return False

    token = authorization.removeprefix(BEARER_PREFIX).strip()
    if not token:
        return False

    decoded = decode_token(token)
    return decoded is not None and decoded.startswith(ADMIN_MARKER)
