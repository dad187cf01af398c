"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID

from api.dependencies import reset_container
from modules.auth.hashing import PasswordHasher
from modules.auth.service import TokenService
from modules.users.models import User


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

TEST_USER_ID = "550e8400-e29b-41d4-a716-446655440000"

# Lowest bcrypt cost keeps hashing tests fast
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    user_id: str = TEST_USER_ID,
    username: str = "testuser",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token for authentication.

    Args:
        user_id: User ID to include in the token
        username: Username to include in the token
        email: Email to include in the token
        expired: If True, creates an already expired token
        secret: Signing secret

    Returns:
        Signed token string
    """
    expires_in = timedelta(hours=-1) if expired else timedelta(hours=1)
    return TokenService(secret, expires_in).issue(user_id, username, email)


def create_test_user(
    user_id: str = TEST_USER_ID,
    username: str = "testuser",
    email: str = "test@example.com",
    password_hash: str = "$2b$04$notarealhashnotarealhashnotarealhashnotarealhash",
) -> User:
    """Create a stored user record for testing."""
    now = datetime.now(timezone.utc)
    return User(
        id=UUID(user_id),
        username=username,
        email=email,
        password_hash=password_hash,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    """Token service with the test secret and a one hour lifetime."""
    return TokenService(TEST_JWT_SECRET, timedelta(hours=1))


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """bcrypt hasher at the lowest cost."""
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def test_user() -> User:
    """Provide a consistent stored user."""
    return create_test_user()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
