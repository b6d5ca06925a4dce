"""
User profile service.
"""

import logging
import time
from typing import Any

from shared.models import DataResponse
from shared.validators import (
    REQUIRED_FIELDS,
    require_fields,
    validate_birthdate,
    validate_text,
)
from modules.storage.interfaces import IImageStorage
from modules.storage.models import StorageBucket

from .exceptions import UserNotFoundError
from .interfaces import IUserService
from .models import UpdateProfileRequest, UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Reads and edits the calling user's own profile."""

    def __init__(self, repository: UserRepository, images: IImageStorage):
        self._users = repository
        self._images = images

    async def get_profile(self, user_id: int) -> DataResponse[UserProfile]:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return DataResponse[UserProfile](data=UserProfile.from_record(user))

    async def update_profile(
        self, user_id: int, request: UpdateProfileRequest
    ) -> DataResponse[UserProfile]:
        """
        Apply a profile update.

        Only fields present in the request are written. A new profile
        image is attached after the text fields are saved; if that fails
        the update still succeeds and the response carries a warning.
        """
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["profile_update"])

        changes: dict[str, Any] = {"full_name": validate_text(request.full_name, "fullName")}
        if request.gender is not None:
            changes["gender"] = validate_text(request.gender, "gender")
        if request.birthdate is not None:
            changes["birthdate"] = validate_birthdate(request.birthdate)

        if self._users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        user = self._users.update(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)

        attachment = await self._images.attach(
            request.profile_image,
            StorageBucket.PROFILE_IMAGES,
            f"profile_{user_id}_{int(time.time() * 1000)}",
            lambda url: self._users.update(user_id, {"profile_picture": url}),
        )
        if attachment.record is not None:
            user = attachment.record

        logger.info("Updated profile for user %s", user_id)
        return DataResponse[UserProfile](
            message="Profile updated successfully",
            data=UserProfile.from_record(user),
            warning=attachment.warning,
        )
