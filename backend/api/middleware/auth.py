"""
Bearer token authentication.

Validates session tokens and builds the typed principal handed to
route handlers.
"""

from typing import Optional
from fastapi import Depends, HTTPException, Request, status

from api.dependencies import get_token_service
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.interfaces import ITokenService
from modules.auth.models import TokenClaims
from shared.models import AuthenticatedUser

BEARER_PREFIX = "Bearer"
INVALID_HEADER_FORMAT = "Invalid authorization header format. Expected: Bearer <token>"


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value.

    The header must be exactly "Bearer <token>".

    Raises:
        AuthError: If the header is missing or malformed
    """
    if not authorization:
        raise AuthError(MissingTokenError().message)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_PREFIX:
        raise AuthError(INVALID_HEADER_FORMAT)

    return parts[1]


def decode_token(token: str, tokens: ITokenService) -> TokenClaims:
    """
    Validate a session token.

    Args:
        token: The token string
        tokens: Token service holding the signing secret

    Returns:
        TokenClaims with decoded claims

    Raises:
        AuthError: If token is invalid or expired
    """
    try:
        return tokens.validate(token)
    except ExpiredTokenError as e:
        raise AuthError(e.message)
    except InvalidTokenError as e:
        raise AuthError(e.message)


def get_user_from_claims(claims: TokenClaims) -> AuthenticatedUser:
    """
    Convert token claims to the AuthenticatedUser principal.

    Args:
        claims: Validated token claims

    Returns:
        AuthenticatedUser instance
    """
    return AuthenticatedUser(
        id=claims.user_id,
        username=claims.username,
        email=claims.email,
    )


async def get_current_user(
    request: Request,
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    claims = decode_token(token, tokens)
    return get_user_from_claims(claims)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)
