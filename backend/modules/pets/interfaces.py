"""
Pets module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser, DataResponse, Envelope

from .models import CreatePetRequest, Pet, UpdatePetRequest


@runtime_checkable
class IPetService(Protocol):
    """
    Interface for pet profile operations.

    Every operation is scoped to the caller's own pets. A pet that
    exists but belongs to someone else is reported as not found.
    """

    async def create_pet(
        self, user: AuthenticatedUser, request: CreatePetRequest
    ) -> DataResponse[Pet]:
        """Create a pet owned by the caller, optionally with a picture."""
        ...

    async def list_pets(self, user: AuthenticatedUser) -> DataResponse[list[Pet]]:
        """List the caller's pets, or every pet for an administrator."""
        ...

    async def get_pet(self, user: AuthenticatedUser, pet_id: int) -> DataResponse[Pet]:
        """Get one of the caller's pets."""
        ...

    async def update_pet(
        self, user: AuthenticatedUser, pet_id: int, request: UpdatePetRequest
    ) -> DataResponse[Pet]:
        """Update the given fields of one of the caller's pets."""
        ...

    async def delete_pet(self, user: AuthenticatedUser, pet_id: int) -> Envelope:
        """Delete one of the caller's pets with its tasks and medical records."""
        ...
