"""
Shared infrastructure for the Chirp backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with ownership-scoped writes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .exceptions import (
    ChirpError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConfigurationError,
    ExternalServiceError,
    StoreError,
    StoreUnavailableError,
)
from .models import AuthenticatedUser, PartialUpdate

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "ChirpError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ConfigurationError",
    "ExternalServiceError",
    "StoreError",
    "StoreUnavailableError",
    "AuthenticatedUser",
    "PartialUpdate",
]
