"""
Authentication module.

Handles password hashing, session tokens, registration and login.

Public API:
- IAuthService: Interface for auth operations
- PasswordHasher: bcrypt credential hasher
- TokenService, TokenClaims: Session token issuer/verifier
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from .passwords import PasswordHasher
from .tokens import TokenClaims, TokenService
from .exceptions import (
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
    InvalidCredentialsError,
    ForbiddenError,
    IssuanceError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TokenClaims",
    # Services
    "PasswordHasher",
    "TokenService",
    # Exceptions
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "IssuanceError",
]
