"""
Shared infrastructure for PetPal backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- validators: Request field validation
- repository: Base repository with error mapping

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    PetPalError,
    ValidationError,
    MissingFieldError,
    InvalidFieldError,
    InvalidEmailError,
    WeakPasswordError,
    InvalidBirthdateError,
    DuplicateError,
    AuthenticationError,
    AuthorizationError,
    OwnershipError,
    NotFoundError,
    MethodNotAllowedError,
    ConfigurationError,
    DependencyError,
)
from .models import AuthenticatedUser, CamelModel, DataResponse, Envelope

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "PetPalError",
    "ValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "InvalidEmailError",
    "WeakPasswordError",
    "InvalidBirthdateError",
    "DuplicateError",
    "AuthenticationError",
    "AuthorizationError",
    "OwnershipError",
    "NotFoundError",
    "MethodNotAllowedError",
    "ConfigurationError",
    "DependencyError",
    "AuthenticatedUser",
    "CamelModel",
    "DataResponse",
    "Envelope",
]
