"""
User service implementation.

Account creation, registration and login. Every operation is a linear
sequence that stops at the first failure; nothing is rolled back. If a
user is created but its token cannot be issued, the user stays stored
and the token error is raised.

The service never logs and never retries.
"""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Awaitable, Optional, TypeVar

from shared.exceptions import RoadmapError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IPasswordHasher, ITokenService
from modules.auth.password_policy import validate_password
from modules.auth.exceptions import TokenIssueError

from .interfaces import IUserRepository, IUserService
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
from .exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
    UserStoreError,
)

T = TypeVar("T")


class UserService(IUserService):
    """
    Implementation of the user service.

    Args:
        repository: Identity store
        hasher: Password hasher
        tokens: Session token service
        store_timeout: Optional per-call limit, in seconds, for store calls
    """

    def __init__(
        self,
        repository: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
        store_timeout: Optional[float] = None,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens
        self._store_timeout = store_timeout

    async def create_user(self, request: CreateUserRequest) -> CreateUserResponse:
        """Create a user without issuing a token."""
        user = await self._create(request)
        return CreateUserResponse.from_user(user)

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """Create a user and issue a session token for it."""
        user = await self._create(request)
        token = self._issue_token(user)
        return RegisterResponse.from_user(user, token)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Check email and password, then issue a session token."""
        try:
            user = await self._store(self._repository.get_by_email(request.email))
        except (UserNotFoundError, UserStoreError):
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(
            self._hasher.verify, request.password, user.password_hash
        )
        if not matches:
            raise InvalidCredentialsError()

        # Token errors propagate as-is, unlike lookup failures.
        token = self._issue_token(user)
        return LoginResponse(token=token)

    async def get_profile(self, user: AuthenticatedUser) -> ProfileResponse:
        """Return the profile carried by the authenticated principal."""
        return ProfileResponse(
            user_id=user.id,
            username=user.username,
            email=user.email,
        )

    async def _create(self, request: CreateUserRequest) -> User:
        """
        Shared create path for create_user and register.

        The order of checks decides which error is reported when several
        apply: email conflict, then username conflict, then password policy.
        """
        if await self._store(self._repository.email_exists(request.email)):
            raise EmailAlreadyExistsError()

        if await self._store(self._repository.username_exists(request.username)):
            raise UsernameAlreadyExistsError()

        validate_password(request.password)

        # Hashing runs in a worker thread.
        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4(),
            username=request.username,
            email=request.email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        return await self._store(self._repository.create(user))

    def _issue_token(self, user: User) -> str:
        """Issue a session token, classifying any signing failure as TokenIssueError."""
        try:
            return self._tokens.issue(str(user.id), user.username, user.email)
        except RoadmapError:
            raise
        except Exception as e:
            raise TokenIssueError(str(e)) from e

    async def _store(self, call: Awaitable[T]) -> T:
        """
        Await an identity store call.

        Store errors already classified by the repository pass through.
        Anything else, including a timeout, becomes UserStoreError.
        """
        try:
            if self._store_timeout is None:
                return await call
            return await asyncio.wait_for(call, self._store_timeout)
        except RoadmapError:
            raise
        except asyncio.TimeoutError as e:
            raise UserStoreError("identity store call timed out") from e
        except Exception as e:
            raise UserStoreError(f"identity store call failed: {e}") from e
