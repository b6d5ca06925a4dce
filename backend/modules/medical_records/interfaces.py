"""
Medical records module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser, DataResponse, Envelope

from .models import CreateMedicalRecordRequest, MedicalRecord, UpdateMedicalRecordRequest


@runtime_checkable
class IMedicalRecordService(Protocol):
    """
    Interface for medical record operations.

    Records are only visible to the owner of the pet they belong to.
    """

    async def list_for_pet(
        self, user: AuthenticatedUser, pet_id: int
    ) -> DataResponse[list[MedicalRecord]]:
        """List one pet's records, newest first."""
        ...

    async def list_all(self, user: AuthenticatedUser) -> DataResponse[list[MedicalRecord]]:
        """List the caller's records across all their pets."""
        ...

    async def create_record(
        self, user: AuthenticatedUser, request: CreateMedicalRecordRequest
    ) -> DataResponse[MedicalRecord]:
        ...

    async def get_record(
        self, user: AuthenticatedUser, record_id: int
    ) -> DataResponse[MedicalRecord]:
        ...

    async def update_record(
        self, user: AuthenticatedUser, record_id: int, request: UpdateMedicalRecordRequest
    ) -> DataResponse[MedicalRecord]:
        ...

    async def delete_record(self, user: AuthenticatedUser, record_id: int) -> Envelope:
        ...
