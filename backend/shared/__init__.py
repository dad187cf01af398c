"""
Shared infrastructure for Roadmap backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- log_config: Root logger configuration

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, TokenSettings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    RoadmapError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    InfrastructureError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "TokenSettings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "RoadmapError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "InfrastructureError",
    "AuthenticatedUser",
]
