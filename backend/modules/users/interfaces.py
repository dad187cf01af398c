"""
Users module interfaces.

IUserRepository is the identity store contract the service depends on.
IUserService is what the API layer depends on.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from shared.models import AuthenticatedUser

from .models import (
    User,
    CreateUserRequest,
    CreateUserResponse,
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
)


@runtime_checkable
class IUserRepository(Protocol):
    """
    Identity store contract.

    Implementations raise UserNotFoundError for missing rows and
    UserStoreError for any other failure.
    """

    async def create(self, user: User) -> User:
        """Persist a new user and return the stored record."""
        ...

    async def get_by_id(self, user_id: UUID) -> User:
        """Look up a user by ID."""
        ...

    async def get_by_email(self, email: str) -> User:
        """Look up a user by exact email."""
        ...

    async def email_exists(self, email: str) -> bool:
        """Return True if any user has this exact email."""
        ...

    async def username_exists(self, username: str) -> bool:
        """Return True if any user has this exact username."""
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for account operations.

    This protocol defines the contract that the users module exposes
    to the API layer.
    """

    async def create_user(self, request: CreateUserRequest) -> CreateUserResponse:
        """
        Create a user without starting a session.

        Checks run in a fixed order: email uniqueness, username
        uniqueness, password policy. The first failure is raised.

        Raises:
            EmailAlreadyExistsError: Email already taken
            UsernameAlreadyExistsError: Username already taken
            PasswordPolicyError: Password fails the composition policy
            UserStoreError: The identity store failed
        """
        ...

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Create a user and issue a session token.

        Raises:
            Everything create_user raises, plus
            TokenIssueError: The token could not be signed. The user
                record is still persisted in that case.
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Check credentials and issue a session token.

        Raises:
            InvalidCredentialsError: Unknown email, wrong password or a
                store failure during lookup
            TokenIssueError: The token could not be signed
        """
        ...

    async def get_profile(self, user: AuthenticatedUser) -> ProfileResponse:
        """Return the profile of the authenticated user."""
        ...
