"""
Token service implementation.

Issues and validates HS256-signed session tokens (JWT).
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Union

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import TokenSettings

from .interfaces import ITokenService
from .models import TokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    TokenIssueError,
)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "exp", "iat", "nbf"]


class TokenService(ITokenService):
    """
    Implementation of the token service.

    Holds a secret and a lifetime. A zero or negative lifetime is allowed
    and produces tokens that are already expired.
    """

    def __init__(self, secret_key: Union[str, bytes], expires_in: timedelta):
        self._secret_key = secret_key
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: TokenSettings) -> "TokenService":
        """Create a token service from token settings."""
        return cls(settings.secret_key, settings.expires_in)

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, user_id: str, username: str, email: str) -> str:
        """
        Issue a signed token for a user.

        Each token carries a random ``jti`` so two tokens issued within
        the same second are still distinct.
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "username": username,
            "email": email,
            "iat": now,
            "nbf": now,
            "exp": now + self._expires_in,
            "jti": uuid.uuid4().hex,
        }

        try:
            return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenIssueError(str(e)) from e

    def validate(self, token: str) -> TokenClaims:
        """
        Validate a token and return its claims.

        Only HS256 is accepted, which rejects unsigned tokens and tokens
        signed with any other scheme. The signature is checked before the
        expiry, so a tampered expired token is reported as invalid.
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()

        return self._to_claims(payload)

    def _to_claims(self, payload: dict[str, Any]) -> TokenClaims:
        """Map a decoded payload to TokenClaims."""
        try:
            return TokenClaims(
                user_id=payload["sub"],
                username=payload["username"],
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                not_before=datetime.fromtimestamp(payload["nbf"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=payload.get("jti", ""),
            )
        except (KeyError, TypeError, ValueError, PydanticValidationError):
            raise InvalidTokenError()

