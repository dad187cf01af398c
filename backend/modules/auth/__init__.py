"""
Authentication module.

Handles password policy, password hashing and session tokens.

Public API:
- ITokenService / IPasswordHasher: Interfaces for auth operations
- TokenService: HS256 session tokens
- PasswordHasher: bcrypt password hashing
- validate_password: Password composition policy
- TokenClaims: Claims carried by a session token
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ITokenService, IPasswordHasher
from .models import TokenClaims
from .hashing import PasswordHasher
from .password_policy import validate_password, MIN_PASSWORD_LENGTH
from .service import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenIssueError,
    PasswordPolicyError,
    PasswordTooLongError,
)

__all__ = [
    # Interfaces
    "ITokenService",
    "IPasswordHasher",
    # Implementations
    "TokenService",
    "PasswordHasher",
    "validate_password",
    "MIN_PASSWORD_LENGTH",
    # Models
    "TokenClaims",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "TokenIssueError",
    "PasswordPolicyError",
    "PasswordTooLongError",
]
