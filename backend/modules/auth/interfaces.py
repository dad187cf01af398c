"""
Authentication module interface.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for session token operations.

    Implementations hold only immutable configuration and are safe to
    share across concurrent requests.
    """

    def issue(self, user_id: str, username: str, email: str) -> str:
        """
        Issue a signed session token.

        Args:
            user_id: Subject identifier
            username: Username to embed
            email: Email to embed

        Returns:
            Compact signed token string

        Raises:
            TokenIssueError: If the token cannot be signed
        """
        ...

    def validate(self, token: str) -> TokenClaims:
        """
        Validate a token and return its claims.

        Raises:
            InvalidTokenError: Malformed, wrongly signed or wrong algorithm
            ExpiredTokenError: Signature is good but the token has expired
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Interface for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the stored hash."""
        ...
