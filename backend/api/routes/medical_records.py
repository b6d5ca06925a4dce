"""
Medical record API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from modules.medical_records.interfaces import IMedicalRecordService
from modules.medical_records.models import (
    CreateMedicalRecordRequest,
    MedicalRecord,
    UpdateMedicalRecordRequest,
)
from shared.exceptions import MissingFieldError
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_medical_record_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("", response_model=DataResponse[list[MedicalRecord]])
async def list_pet_records(
    pet_id: Optional[int] = Query(default=None, alias="petId"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> DataResponse[list[MedicalRecord]]:
    """List one pet's medical records, most recent first."""
    if pet_id is None:
        raise MissingFieldError("petId")
    return await service.list_for_pet(user, pet_id)


@router.get("/all", response_model=DataResponse[list[MedicalRecord]])
async def list_all_records(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> DataResponse[list[MedicalRecord]]:
    """List the caller's medical records across all pets."""
    return await service.list_all(user)


@router.post("", response_model=DataResponse[MedicalRecord], status_code=status.HTTP_201_CREATED)
async def create_record(
    request: CreateMedicalRecordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> DataResponse[MedicalRecord]:
    return await service.create_record(user, request)


@router.get("/{record_id}", response_model=DataResponse[MedicalRecord])
async def get_record(
    record_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> DataResponse[MedicalRecord]:
    return await service.get_record(user, record_id)


@router.put("/{record_id}", response_model=DataResponse[MedicalRecord])
async def update_record(
    record_id: int,
    request: UpdateMedicalRecordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> DataResponse[MedicalRecord]:
    return await service.update_record(user, record_id, request)


@router.delete("/{record_id}", response_model=Envelope)
async def delete_record(
    record_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMedicalRecordService = Depends(get_medical_record_service),
) -> Envelope:
    return await service.delete_record(user, record_id)
