"""
Base exception classes for the Roadmap backend.

Each module defines its own exceptions that inherit from these bases.
The bases form the closed set of error kinds the API layer maps to
HTTP responses: validation, conflict, authentication, not-found and
infrastructure.
"""

from typing import Optional, Any


class RoadmapError(Exception):
    """
    Base exception for all Roadmap errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(RoadmapError):
    """Resource not found."""

    pass


class ValidationError(RoadmapError):
    """Input validation failed."""

    pass


class ConflictError(RoadmapError):
    """A uniqueness constraint would be violated."""

    def __init__(
        self,
        message: str,
        field: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.field = field
        self.details["field"] = field


class AuthenticationError(RoadmapError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class InfrastructureError(RoadmapError):
    """
    Failure in an underlying system (store, signer) unrelated to business rules.

    The original exception is kept as ``__cause__`` by raising with ``from``;
    callers surface a generic message and never leak ``details``.
    """

    def __init__(
        self,
        message: str,
        component: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.component = component
        self.details["component"] = component
