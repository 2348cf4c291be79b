# =============================================================================
# tests/test_tokens.py - Admin Token Tests
# =============================================================================
# Unit tests for admin token issue/decode and the Authorization header check.
#
# Run with: poetry run pytest tests/test_tokens.py -v
# =============================================================================

import base64

import pytest

from app.auth.tokens import (
    ADMIN_MARKER,
    decode_token,
    is_admin_header,
    issue_admin_token,
)


def encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestIssueAdminToken:
    """Tests for issue_admin_token()."""

    def test_token_decodes_to_marker_and_timestamp(self):
        token = issue_admin_token(now_ms=1718000000000)

        assert decode_token(token) == "admin:1718000000000"

    def test_issued_token_is_admin(self):
        assert is_admin_header(f"Bearer {issue_admin_token()}")


class TestDecodeToken:
    """Tests for decode_token()."""

    def test_missing_padding_is_tolerated(self):
        # "admin:1" encodes to "YWRtaW46MQ=="
        assert decode_token("YWRtaW46MQ") == "admin:1"

    @pytest.mark.parametrize("token", ["abcde", "é", "a"])
    def test_garbage_returns_none(self, token):
        assert decode_token(token) is None

    def test_non_utf8_payload_returns_none(self):
        token = base64.b64encode(b"\xff\xfe\xfd").decode("ascii")

        assert decode_token(token) is None


class TestIsAdminHeader:
    """Tests for is_admin_header() - the gate decision."""

    def test_bearer_token_with_marker(self):
        assert is_admin_header(f"Bearer {encode('admin:42')}")

    def test_bare_token_without_bearer_prefix(self):
        assert is_admin_header(encode("admin:42"))

    def test_marker_alone_is_enough(self):
        assert is_admin_header(encode(ADMIN_MARKER))

    @pytest.mark.parametrize("header", [None, "", "Bearer ", "Bearer    "])
    def test_absent_or_empty_header_is_not_admin(self, header):
        assert not is_admin_header(header)

    def test_wrong_marker_is_not_admin(self):
        assert not is_admin_header(f"Bearer {encode('user:42')}")

    def test_marker_must_be_a_prefix(self):
        assert not is_admin_header(f"Bearer {encode('xadmin:42')}")

    def test_undecodable_token_fails_closed(self):
        assert not is_admin_header("Bearer !!!!")
