"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Claims carried by a session token.

    On the wire these are the registered JWT claims ``sub``, ``iat``,
    ``nbf``, ``exp`` and ``jti`` plus the custom ``username`` and
    ``email`` claims.
    """

    user_id: str = Field(..., description="Subject (user ID)")
    username: str = Field(..., description="Username at issue time")
    email: str = Field(..., description="Email at issue time")
    issued_at: datetime = Field(..., description="Issued at")
    not_before: datetime = Field(..., description="Not valid before")
    expires_at: datetime = Field(..., description="Expiration time")
    token_id: str = Field(..., description="Unique token identifier")

    model_config = {"frozen": True}
