import pytest
from pydantic import ValidationError

from modules.users.models import (
    CreateUserRequest,
    CreateUserResponse,
    LoginRequest,
    RegisterResponse,
)
from tests.conftest import create_test_user


class TestUser:
    def test_password_hash_not_serialized(self):
        """The hash never appears in dumped data."""
        user = create_test_user()
        assert "password_hash" not in user.model_dump()
        assert "password_hash" not in user.model_dump_json()

    def test_password_hash_not_in_repr(self):
        user = create_test_user()
        assert user.password_hash not in repr(user)


class TestCreateUserRequest:
    def test_valid_request(self):
        request = CreateUserRequest(
            email="test@example.com",
            username="testuser",
            password="SecurePass123!",
        )
        assert request.email == "test@example.com"

    def test_email_kept_as_given(self):
        """Email case is preserved."""
        request = CreateUserRequest(
            email="Test@Example.com",
            username="testuser",
            password="SecurePass123!",
        )
        assert request.email == "Test@Example.com"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            CreateUserRequest(email="not-an-email", username="testuser", password="SecurePass123!")

    @pytest.mark.parametrize("username", ["ab", "x" * 101])
    def test_username_length(self, username):
        with pytest.raises(ValidationError):
            CreateUserRequest(email="test@example.com", username=username, password="SecurePass123!")

    def test_short_password(self):
        with pytest.raises(ValidationError):
            CreateUserRequest(email="test@example.com", username="testuser", password="Short1!")


class TestLoginRequest:
    def test_requires_password(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="test@example.com", password="")


class TestResponses:
    def test_create_response_from_user(self):
        user = create_test_user()
        response = CreateUserResponse.from_user(user)

        assert response.id == user.id
        assert set(response.model_dump()) == {
            "id", "username", "email", "created_at", "updated_at",
        }

    def test_register_response_from_user(self):
        user = create_test_user()
        response = RegisterResponse.from_user(user, "token")

        assert response.token == "token"
        assert "password_hash" not in response.model_dump()
