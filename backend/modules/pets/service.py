"""
Pet profile service.
"""

import logging
import time
from typing import Any, Optional

from shared.models import AuthenticatedUser, DataResponse, Envelope
from shared.validators import REQUIRED_FIELDS, require_fields, validate_range, validate_text
from modules.storage.interfaces import IImageStorage
from modules.storage.models import StorageBucket
from modules.users.repository import UserRepository

from .exceptions import PetNotFoundError
from .interfaces import IPetService
from .models import CreatePetRequest, Pet, UpdatePetRequest
from .repository import PetRepository

logger = logging.getLogger(__name__)


class PetService(IPetService):
    """Implementation of pet profile operations."""

    def __init__(self, pets: PetRepository, users: UserRepository, images: IImageStorage):
        self._pets = pets
        self._users = users
        self._images = images

    async def create_pet(
        self, user: AuthenticatedUser, request: CreatePetRequest
    ) -> DataResponse[Pet]:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["pet"])
        pet = self._pets.create({
            "user_id": user.id,
            "name": validate_text(request.name, "name"),
            "age": int(validate_range(request.age, "age", minimum=0)),
            "type": validate_text(request.type, "type"),
            "breed": validate_text(request.breed, "breed"),
        })
        logger.info("User %s created pet %s", user.id, pet.id)

        pet, warning = await self._attach_picture(user.id, pet, request.image_base64)
        return DataResponse[Pet](message="Pet created successfully", data=pet, warning=warning)

    async def list_pets(self, user: AuthenticatedUser) -> DataResponse[list[Pet]]:
        """
        List pets visible to the caller.

        The admin flag is read from the database rather than the token,
        so a revoked administrator only sees their own pets.
        """
        record = self._users.get_by_id(user.id)
        if record is not None and record.is_admin:
            pets = self._pets.list_all()
        else:
            pets = self._pets.list_by_user(user.id)
        return DataResponse[list[Pet]](data=pets)

    async def get_pet(self, user: AuthenticatedUser, pet_id: int) -> DataResponse[Pet]:
        return DataResponse[Pet](data=self._get_owned(user, pet_id))

    async def update_pet(
        self, user: AuthenticatedUser, pet_id: int, request: UpdatePetRequest
    ) -> DataResponse[Pet]:
        pet = self._get_owned(user, pet_id)

        changes: dict[str, Any] = {}
        if request.name is not None:
            changes["name"] = validate_text(request.name, "name")
        if request.age is not None:
            changes["age"] = int(validate_range(request.age, "age", minimum=0))
        if request.type is not None:
            changes["type"] = validate_text(request.type, "type")
        if request.breed is not None:
            changes["breed"] = validate_text(request.breed, "breed")

        if changes:
            pet = self._pets.update(pet_id, changes) or pet
            logger.info("User %s updated pet %s", user.id, pet_id)

        pet, warning = await self._attach_picture(user.id, pet, request.image_base64)
        return DataResponse[Pet](message="Pet updated successfully", data=pet, warning=warning)

    async def delete_pet(self, user: AuthenticatedUser, pet_id: int) -> Envelope:
        self._get_owned(user, pet_id)
        self._pets.delete(pet_id)
        logger.info("User %s deleted pet %s", user.id, pet_id)
        return Envelope(message="Pet deleted successfully")

    def _get_owned(self, user: AuthenticatedUser, pet_id: int) -> Pet:
        pet = self._pets.get_owned(pet_id, user.id)
        if pet is None:
            raise PetNotFoundError(pet_id, user.id)
        return pet

    async def _attach_picture(
        self, user_id: int, pet: Pet, payload: Optional[str]
    ) -> tuple[Pet, Optional[str]]:
        attachment = await self._images.attach(
            payload,
            StorageBucket.PET_IMAGES,
            f"pet_{user_id}_{pet.id}_{int(time.time() * 1000)}",
            lambda url: self._pets.update(pet.id, {"pet_picture": url}),
        )
        return (attachment.record or pet), attachment.warning
