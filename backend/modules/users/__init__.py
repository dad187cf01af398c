"""
Users module.

Handles account creation, registration, login and profiles.

Public API:
- IUserService: Interface for account operations
- IUserRepository: Identity store contract
- User, request and response models
- Users exceptions: EmailAlreadyExistsError, InvalidCredentialsError, etc.
"""

from .interfaces import IUserService, IUserRepository
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

__all__ = [
    # Interfaces
    "IUserService",
    "IUserRepository",
    # Models
    "User",
    "CreateUserRequest",
    "CreateUserResponse",
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    # Exceptions
    "EmailAlreadyExistsError",
    "UsernameAlreadyExistsError",
    "InvalidCredentialsError",
    "UserNotFoundError",
    "UserStoreError",
]
