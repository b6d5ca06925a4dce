"""
Admin module.

User, pet and post moderation plus dashboard statistics.

Public API:
- IAdminService: Interface for admin operations
- AdminRepository: Cross-table maintenance queries
- AdminUser, StatsResponse: Models
- CannotDeleteAdminError
"""

from .interfaces import IAdminService
from .models import AdminUser, GenderCount, PetTypeCount, StatsResponse
from .repository import AdminRepository
from .exceptions import CannotDeleteAdminError

__all__ = [
    "IAdminService",
    "AdminRepository",
    "AdminUser",
    "GenderCount",
    "PetTypeCount",
    "StatsResponse",
    "CannotDeleteAdminError",
]
