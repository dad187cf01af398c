"""
Users module data models.

User is the stored identity record; the request and response models are
the shapes exchanged with the API layer. The password hash never leaves
User: it is excluded from serialization and from repr.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, Field
from pydantic.networks import validate_email

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 100


def _check_email(value: str) -> str:
    # Validate the format but keep the address exactly as given;
    # emails are matched case-sensitively.
    validate_email(value)
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class User(BaseModel):
    """A registered account as held by the identity store."""

    id: UUID
    username: str
    email: str
    password_hash: str = Field(..., exclude=True, repr=False)
    created_at: datetime
    updated_at: datetime


class CreateUserRequest(BaseModel):
    """Request to create a user account."""

    email: Email = Field(..., description="Email address, used to log in")
    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        description="Unique username",
    )
    password: str = Field(..., min_length=8, description="Plaintext password")


class RegisterRequest(CreateUserRequest):
    """Request to register a user account and start a session."""

    pass


class LoginRequest(BaseModel):
    """Request to log in with email and password."""

    email: Email
    password: str = Field(..., min_length=1)


class CreateUserResponse(BaseModel):
    """Public fields of a newly created user."""

    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "CreateUserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class RegisterResponse(CreateUserResponse):
    """Public fields of a newly registered user plus a session token."""

    token: str

    @classmethod
    def from_user(cls, user: User, token: str) -> "RegisterResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            token=token,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class LoginResponse(BaseModel):
    """Session token returned by a successful login."""

    token: str


class ProfileResponse(BaseModel):
    """Profile of the authenticated user."""

    user_id: str
    username: str
    email: str
