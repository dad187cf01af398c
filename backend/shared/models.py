"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Built once per request by the auth dependency from validated token
    claims and passed explicitly to route handlers.
    """

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
