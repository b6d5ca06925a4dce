"""
User-related endpoints.

Provides endpoints for the caller's own profile.
"""

from fastapi import APIRouter, Depends

from modules.users.interfaces import IUserService
from modules.users.models import UpdateProfileRequest, UserProfile
from shared.models import AuthenticatedUser, DataResponse

from ..dependencies import get_user_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=DataResponse[UserProfile])
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> DataResponse[UserProfile]:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_profile(user.id)


@router.put("/me", response_model=DataResponse[UserProfile])
async def update_current_user_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> DataResponse[UserProfile]:
    """Update the current user's profile and, optionally, their picture."""
    return await service.update_profile(user.id, request)
