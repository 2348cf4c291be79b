# =============================================================================
# tests/test_api_auth.py - Admin Login & Gate Tests
# =============================================================================
# Integration tests through the FastAPI TestClient.
#
# Run with: poetry run pytest tests/test_api_auth.py -v
# =============================================================================

import base64

import pytest

from app.auth.tokens import decode_token


class TestLogin:
    """Tests for POST /api/admin/login."""

    def test_correct_password_returns_admin_token(self, client):
        response = client.post("/api/admin/login", json={"password": "admin123"})

        assert response.status_code == 200
        assert decode_token(response.json()["token"]).startswith("admin:")

    def test_wrong_password_is_401(self, client):
        response = client.post("/api/admin/login", json={"password": "guess"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid password"}

    def test_missing_password_is_400(self, client):
        response = client.post("/api/admin/login", json={})

        assert response.status_code == 400
        assert response.json()["field"] == "password"

    def test_non_string_password_is_400(self, client):
        response = client.post("/api/admin/login", json={"password": 123})

        assert response.status_code == 400
        assert response.json()["field"] == "password"

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/admin/login",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


class TestAuthStatus:
    """Tests for GET /api/admin/me - never 401."""

    def test_anonymous(self, client):
        response = client.get("/api/admin/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_with_admin_token(self, client, admin_headers):
        assert client.get("/api/admin/me", headers=admin_headers).json() == {"authenticated": True}

    def test_garbage_token(self, client):
        response = client.get("/api/admin/me", headers={"Authorization": "Bearer ???"})

        assert response.json() == {"authenticated": False}


class TestAdminGate:
    """The gate rejects before any body validation or data-store access."""

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/api/service-requests"),
            ("get", "/api/service-requests/1"),
            ("patch", "/api/service-requests/1"),
            ("post", "/api/content"),
            ("patch", "/api/content/1"),
            ("delete", "/api/content/1"),
            ("post", "/api/verified-candidates"),
            ("patch", "/api/verified-candidates/1"),
            ("get", "/api/templates/all"),
            ("patch", "/api/templates/1"),
            ("delete", "/api/templates/1"),
            ("get", "/api/admin/jobs"),
            ("post", "/api/admin/jobs"),
            ("patch", "/api/admin/jobs/1"),
            ("delete", "/api/admin/jobs/1"),
            ("get", "/api/admin/job-applications"),
            ("get", "/api/admin/training-requests"),
            ("patch", "/api/admin/training-requests/1"),
        ],
    )
    def test_no_token_is_401(self, client, fake_db, method, path):
        response = client.request(method.upper(), path, json={"bogus": True})

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}
        assert fake_db.calls == []

    @pytest.mark.parametrize(
        "path, field",
        [
            ("/api/content/upload", "image"),
            ("/api/verified-candidates/upload", "image"),
            ("/api/templates/upload", "file"),
        ],
    )
    def test_uploads_need_admin(self, client, fake_db, path, field):
        response = client.post(path, files={field: ("a.png", b"x", "image/png")})

        assert response.status_code == 401
        assert fake_db.calls == []
        assert fake_db.storage.calls == []

    def test_non_admin_token_is_401(self, client):
        token = base64.b64encode(b"user:1").decode("ascii")

        response = client.get("/api/admin/jobs", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_bare_admin_token_accepted(self, client):
        token = base64.b64encode(b"admin:1").decode("ascii")

        response = client.get("/api/admin/jobs", headers={"Authorization": token})

        assert response.status_code == 200
