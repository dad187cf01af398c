"""
Tests for bearer token authentication.
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from api.app import create_app
from api.dependencies import get_token_service, get_user_service
from api.middleware.auth import (
    AuthError,
    decode_token,
    extract_bearer_token,
    get_user_from_claims,
)
from modules.auth.service import TokenService
from modules.users.models import ProfileResponse
from tests.conftest import TEST_JWT_SECRET, TEST_USER_ID, create_test_token


@pytest.fixture
def client(token_service):
    app = create_app()
    service = AsyncMock()
    service.get_profile.side_effect = lambda user: ProfileResponse(
        user_id=user.id, username=user.username, email=user.email
    )
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_user_service] = lambda: service
    return TestClient(app)


class TestExtractBearerToken:
    def test_valid_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, header):
        with pytest.raises(AuthError) as exc_info:
            extract_bearer_token(header)
        assert exc_info.value.detail == "Authorization header is required"

    @pytest.mark.parametrize(
        "header",
        [
            "abc.def.ghi",
            "Basic abc.def.ghi",
            "bearer abc.def.ghi",
            "Bearer",
            "Bearer a b",
            "Bearer  abc",
        ],
    )
    def test_malformed_header(self, header):
        with pytest.raises(AuthError) as exc_info:
            extract_bearer_token(header)
        assert exc_info.value.detail == (
            "Invalid authorization header format. Expected: Bearer <token>"
        )
        assert exc_info.value.status_code == 401


class TestDecodeToken:
    def test_valid_token(self, token_service):
        claims = decode_token(create_test_token(), token_service)
        assert claims.user_id == TEST_USER_ID
        assert claims.username == "testuser"

    def test_expired_token(self, token_service):
        with pytest.raises(AuthError) as exc_info:
            decode_token(create_test_token(expired=True), token_service)
        assert exc_info.value.detail == "Token has expired"

    def test_invalid_token(self, token_service):
        with pytest.raises(AuthError) as exc_info:
            decode_token("invalid-token", token_service)
        assert exc_info.value.detail == "Invalid token"

    def test_get_user_from_claims(self, token_service):
        claims = token_service.validate(create_test_token())
        user = get_user_from_claims(claims)
        assert user.id == TEST_USER_ID
        assert user.email == "test@example.com"


class TestProtectedRoute:
    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/v1/users/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "user_id": TEST_USER_ID,
            "username": "testuser",
            "email": "test@example.com",
        }

    def test_missing_header(self, client):
        response = client.get("/api/v1/users/profile")

        assert response.status_code == 401
        assert response.json() == {"error": "Authorization header is required"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_wrong_scheme(self, client):
        response = client.get(
            "/api/v1/users/profile",
            headers={"Authorization": "Token abc"},
        )

        assert response.status_code == 401
        assert "Expected: Bearer <token>" in response.json()["error"]

    def test_expired_token(self, client):
        token = create_test_token(expired=True)
        response = client.get(
            "/api/v1/users/profile",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Token has expired"}

    def test_token_signed_with_other_secret(self, client):
        token = create_test_token(secret="some-other-secret-key-0123456789abcdef")
        response = client.get(
            "/api/v1/users/profile",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_configured_secret_from_settings(self, monkeypatch):
        """Without overrides, tokens are checked against JWT_SECRET_KEY."""
        from shared.config import get_settings

        monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
        get_settings.cache_clear()
        try:
            app = create_app()
            app.dependency_overrides[get_user_service] = lambda: AsyncMock(
                get_profile=AsyncMock(
                    return_value=ProfileResponse(
                        user_id=TEST_USER_ID, username="testuser", email="test@example.com"
                    )
                )
            )
            response = TestClient(app).get(
                "/api/v1/users/profile",
                headers={"Authorization": f"Bearer {create_test_token()}"},
            )
            assert response.status_code == 200
        finally:
            get_settings.cache_clear()
