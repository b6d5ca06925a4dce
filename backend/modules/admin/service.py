"""
Administrator service.
"""

import logging
from collections import Counter

from shared.models import DataResponse, Envelope
from modules.pets.exceptions import PetNotFoundError
from modules.pets.models import Pet
from modules.pets.repository import PetRepository
from modules.posts.exceptions import PostNotFoundError
from modules.posts.repository import PostRepository
from modules.users.exceptions import UserNotFoundError
from modules.users.repository import UserRepository

from .exceptions import CannotDeleteAdminError
from .interfaces import IAdminService
from .models import AdminUser, GenderCount, PetTypeCount, StatsResponse
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class AdminService(IAdminService):
    """Implementation of administrator operations."""

    def __init__(
        self,
        admin: AdminRepository,
        users: UserRepository,
        pets: PetRepository,
        posts: PostRepository,
    ):
        self._admin = admin
        self._users = users
        self._pets = pets
        self._posts = posts

    async def list_users(self) -> DataResponse[list[AdminUser]]:
        users = [
            AdminUser(
                id=u.id,
                full_name=u.full_name,
                gender=u.gender,
                birthdate=u.birthdate,
                email=u.email,
                is_admin=u.is_admin,
            )
            for u in self._users.list_all()
        ]
        return DataResponse[list[AdminUser]](data=users)

    async def delete_user(self, user_id: int) -> Envelope:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if user.is_admin:
            raise CannotDeleteAdminError(user_id)

        self._admin.delete_user_content(user_id)
        self._users.delete(user_id)
        logger.info("Admin deleted user %s", user_id)
        return Envelope(message="User deleted successfully")

    async def list_pets(self) -> DataResponse[list[Pet]]:
        return DataResponse[list[Pet]](data=self._pets.list_all())

    async def delete_pet(self, pet_id: int) -> Envelope:
        if self._pets.get_by_id(pet_id) is None:
            raise PetNotFoundError(pet_id)
        self._pets.delete(pet_id)
        logger.info("Admin deleted pet %s", pet_id)
        return Envelope(message="Pet deleted successfully")

    async def delete_post(self, post_id: int) -> Envelope:
        if self._posts.get_post(post_id) is None:
            raise PostNotFoundError(post_id)
        self._posts.delete_post(post_id)
        logger.info("Admin deleted post %s", post_id)
        return Envelope(message="Post deleted successfully")

    async def get_stats(self) -> StatsResponse:
        genders = Counter(self._admin.user_genders())
        types = Counter(self._admin.pet_types())
        return StatsResponse(
            user_gender_stats=[GenderCount(gender=g, count=n) for g, n in genders.most_common()],
            pet_type_stats=[PetTypeCount(type=t, count=n) for t, n in types.most_common()],
        )
