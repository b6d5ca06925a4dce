"""
Pet API endpoints.
"""

from fastapi import APIRouter, Depends, status

from modules.pets.interfaces import IPetService
from modules.pets.models import CreatePetRequest, Pet, UpdatePetRequest
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_pet_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.post("", response_model=DataResponse[Pet], status_code=status.HTTP_201_CREATED)
async def create_pet(
    request: CreatePetRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPetService = Depends(get_pet_service),
) -> DataResponse[Pet]:
    return await service.create_pet(user, request)


@router.get("", response_model=DataResponse[list[Pet]])
async def list_pets(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPetService = Depends(get_pet_service),
) -> DataResponse[list[Pet]]:
    """
    List the caller's pets.

    Administrators see every pet.
    """
    return await service.list_pets(user)


@router.get("/{pet_id}", response_model=DataResponse[Pet])
async def get_pet(
    pet_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPetService = Depends(get_pet_service),
) -> DataResponse[Pet]:
    return await service.get_pet(user, pet_id)


@router.put("/{pet_id}", response_model=DataResponse[Pet])
async def update_pet(
    pet_id: int,
    request: UpdatePetRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPetService = Depends(get_pet_service),
) -> DataResponse[Pet]:
    return await service.update_pet(user, pet_id, request)


@router.delete("/{pet_id}", response_model=Envelope)
async def delete_pet(
    pet_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPetService = Depends(get_pet_service),
) -> Envelope:
    """Delete a pet along with its tasks and medical records."""
    return await service.delete_pet(user, pet_id)
