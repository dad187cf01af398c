"""
User API endpoints.

Account creation, registration, login and the authenticated profile.
Domain errors are mapped to HTTP responses here.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_user_service
from api.middleware.auth import get_current_user
from shared.exceptions import (
    ConflictError,
    InfrastructureError,
    RoadmapError,
    ValidationError,
)
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import (
    CreateUserRequest,
    CreateUserResponse,
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
)
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _account_error(exc: RoadmapError, fallback: str) -> JSONResponse:
    """Map a create/register failure to a response."""
    if isinstance(exc, ConflictError):
        return _error(status.HTTP_409_CONFLICT, exc.message)
    if isinstance(exc, ValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)
    logger.error(f"{fallback}: {exc.message}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, fallback)


@router.post(
    "",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/create",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
):
    """
    Create a user account.

    No session token is issued.
    """
    try:
        return await service.create_user(request)
    except (ConflictError, ValidationError, InfrastructureError) as e:
        return _account_error(e, "Failed to create user")


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    service: IUserService = Depends(get_user_service),
):
    """
    Register a user account and return a session token.
    """
    try:
        return await service.register(request)
    except (ConflictError, ValidationError, InfrastructureError) as e:
        return _account_error(e, "Failed to register user")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IUserService = Depends(get_user_service),
):
    """
    Log in with email and password.

    Every credential failure returns the same 401 message.
    """
    try:
        return await service.login(request)
    except InvalidCredentialsError as e:
        return _error(status.HTTP_401_UNAUTHORIZED, e.message)
    except InfrastructureError as e:
        logger.error(f"Failed to login: {e.message}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to login")


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_profile(user)
