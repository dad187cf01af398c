"""
Users module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
)


class EmailAlreadyExistsError(ConflictError):
    """Raised when registering with an email that is already taken."""

    def __init__(self):
        super().__init__(
            "Email already exists",
            field="email",
            code="EMAIL_ALREADY_EXISTS",
        )


class UsernameAlreadyExistsError(ConflictError):
    """Raised when registering with a username that is already taken."""

    def __init__(self):
        super().__init__(
            "Username already exists",
            field="username",
            code="USERNAME_ALREADY_EXISTS",
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised for any failed login.

    Unknown email, wrong password and store failures during lookup all
    raise this same error so callers cannot tell which accounts exist.
    """

    def __init__(self):
        super().__init__(
            "Invalid email or password",
            code="INVALID_CREDENTIALS",
        )


class UserNotFoundError(NotFoundError):
    """Raised by the store when no user matches a lookup."""

    def __init__(self, key: str, value: str):
        super().__init__(
            f"User not found: {key}={value}",
            code="USER_NOT_FOUND",
            details={key: value},
        )


class UserStoreError(InfrastructureError):
    """Raised when the identity store fails."""

    def __init__(self, message: str):
        super().__init__(message, component="user_store", code="USER_STORE_ERROR")
