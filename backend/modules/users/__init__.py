"""
Users module.

Stores user accounts and serves the caller's own profile.

Public API:
- IUserService: Interface for profile operations
- UserRepository: Data access for the users table
- UserRecord, UserProfile, UserSummary: Models
- User exceptions
"""

from .interfaces import IUserService
from .models import UpdateProfileRequest, UserProfile, UserRecord, UserSummary
from .repository import UserRepository
from .exceptions import EmailAlreadyExistsError, UserNotFoundError

__all__ = [
    "IUserService",
    "UserRepository",
    "UpdateProfileRequest",
    "UserProfile",
    "UserRecord",
    "UserSummary",
    "EmailAlreadyExistsError",
    "UserNotFoundError",
]
