"""
Admin module interface.

Callers must have confirmed the caller is an administrator.
"""

from typing import Protocol, runtime_checkable

from shared.models import DataResponse, Envelope
from modules.pets.models import Pet

from .models import AdminUser, StatsResponse


@runtime_checkable
class IAdminService(Protocol):
    """Interface for administrator tooling."""

    async def list_users(self) -> DataResponse[list[AdminUser]]:
        ...

    async def delete_user(self, user_id: int) -> Envelope:
        """
        Delete a non-admin user and everything they own.

        Raises:
            UserNotFoundError: If the user does not exist
            CannotDeleteAdminError: If the user is an administrator
        """
        ...

    async def list_pets(self) -> DataResponse[list[Pet]]:
        ...

    async def delete_pet(self, pet_id: int) -> Envelope:
        ...

    async def delete_post(self, post_id: int) -> Envelope:
        ...

    async def get_stats(self) -> StatsResponse:
        """Count users by gender and pets by type."""
        ...
