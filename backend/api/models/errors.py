"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Invalid request data"
    details: list[dict]
