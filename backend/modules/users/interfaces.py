"""
Users module interface.

Other modules should depend on IUserService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.models import DataResponse

from .models import UpdateProfileRequest, UserProfile


@runtime_checkable
class IUserService(Protocol):
    """Interface for profile operations on the calling user."""

    async def get_profile(self, user_id: int) -> DataResponse[UserProfile]:
        """
        Get a user's own profile.

        Raises:
            UserNotFoundError: If the user row no longer exists
        """
        ...

    async def update_profile(
        self, user_id: int, request: UpdateProfileRequest
    ) -> DataResponse[UserProfile]:
        """
        Update name, gender, birthdate and optionally the profile picture.

        Raises:
            ValidationError: If a submitted field is invalid
            UserNotFoundError: If the user row no longer exists
        """
        ...
