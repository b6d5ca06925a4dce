"""
Administrator API endpoints.

Every route re-reads the caller's admin flag from the database.
"""

from fastapi import APIRouter, Depends

from modules.admin.interfaces import IAdminService
from modules.admin.models import AdminUser, StatsResponse
from modules.pets.models import Pet
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_admin_service
from ..middleware.auth import require_admin

router = APIRouter()


@router.get("/users", response_model=DataResponse[list[AdminUser]])
async def list_users(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DataResponse[list[AdminUser]]:
    return await service.list_users()


@router.delete("/users/{user_id}", response_model=Envelope)
async def delete_user(
    user_id: int,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> Envelope:
    """Delete a user and all their content. Administrators cannot be deleted."""
    return await service.delete_user(user_id)


@router.get("/pets", response_model=DataResponse[list[Pet]])
async def list_pets(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DataResponse[list[Pet]]:
    return await service.list_pets()


@router.delete("/pets/{pet_id}", response_model=Envelope)
async def delete_pet(
    pet_id: int,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> Envelope:
    return await service.delete_pet(pet_id)


@router.delete("/posts/{post_id}", response_model=Envelope)
async def delete_post(
    post_id: int,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> Envelope:
    return await service.delete_post(post_id)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> StatsResponse:
    """Users by gender and pets by type."""
    return await service.get_stats()
