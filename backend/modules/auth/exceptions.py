"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    InfrastructureError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, wrongly signed or uses another algorithm."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authorization header is required"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenIssueError(InfrastructureError):
    """Raised when a token cannot be signed."""

    def __init__(self, reason: str):
        super().__init__(
            f"failed to generate token: {reason}",
            component="token_service",
            code="TOKEN_ISSUE_FAILED",
        )


class PasswordPolicyError(ValidationError):
    """Raised when a password does not satisfy the composition policy."""

    def __init__(self, reason: str):
        super().__init__(
            reason,
            code="PASSWORD_POLICY",
            details={"reason": reason},
        )

    @property
    def reason(self) -> str:
        return self.message


class PasswordTooLongError(PasswordPolicyError):
    """Raised when a password exceeds what the hash function accepts."""

    def __init__(self, max_bytes: int):
        super().__init__(f"password must be at most {max_bytes} bytes long")
        self.details["max_bytes"] = max_bytes
