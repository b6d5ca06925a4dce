"""
Medical record service.
"""

import logging
from typing import Any

from shared.models import AuthenticatedUser, DataResponse, Envelope
from shared.validators import REQUIRED_FIELDS, require_fields, validate_date, validate_text
from modules.pets.exceptions import PetNotFoundError
from modules.pets.repository import PetRepository

from .exceptions import MedicalRecordNotFoundError
from .interfaces import IMedicalRecordService
from .models import CreateMedicalRecordRequest, MedicalRecord, UpdateMedicalRecordRequest
from .repository import MedicalRecordRepository

logger = logging.getLogger(__name__)

# attribute -> wire name
CONTENT_FIELDS = {
    "diagnose": "diagnose",
    "vet_name": "vetName",
    "medication": "medication",
    "description": "description",
}


class MedicalRecordService(IMedicalRecordService):
    """Implementation of medical record operations."""

    def __init__(self, records: MedicalRecordRepository, pets: PetRepository):
        self._records = records
        self._pets = pets

    async def list_for_pet(
        self, user: AuthenticatedUser, pet_id: int
    ) -> DataResponse[list[MedicalRecord]]:
        self._require_pet(user, pet_id)
        return DataResponse[list[MedicalRecord]](
            data=self._records.list_for_pet(pet_id, user.id)
        )

    async def list_all(self, user: AuthenticatedUser) -> DataResponse[list[MedicalRecord]]:
        return DataResponse[list[MedicalRecord]](data=self._records.list_by_user(user.id))

    async def create_record(
        self, user: AuthenticatedUser, request: CreateMedicalRecordRequest
    ) -> DataResponse[MedicalRecord]:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["medical_record"])
        values = self._content(request)
        self._require_pet(user, request.pet_id)

        record = self._records.create({"user_id": user.id, "pet_id": request.pet_id, **values})
        logger.info("User %s added medical record %s to pet %s", user.id, record.id, request.pet_id)
        return DataResponse[MedicalRecord](
            message="Medical record created successfully", data=record
        )

    async def get_record(
        self, user: AuthenticatedUser, record_id: int
    ) -> DataResponse[MedicalRecord]:
        return DataResponse[MedicalRecord](data=self._get_owned(user, record_id))

    async def update_record(
        self, user: AuthenticatedUser, record_id: int, request: UpdateMedicalRecordRequest
    ) -> DataResponse[MedicalRecord]:
        """
        Replace a record's contents.

        All content fields are required, the same as on creation.
        """
        require_fields(
            request.model_dump(by_alias=True), REQUIRED_FIELDS["medical_record_update"]
        )
        values = self._content(request)
        existing = self._get_owned(user, record_id)

        record = self._records.update(record_id, values) or existing
        logger.info("User %s updated medical record %s", user.id, record_id)
        return DataResponse[MedicalRecord](
            message="Medical record updated successfully", data=record
        )

    async def delete_record(self, user: AuthenticatedUser, record_id: int) -> Envelope:
        self._get_owned(user, record_id)
        self._records.delete(record_id)
        logger.info("User %s deleted medical record %s", user.id, record_id)
        return Envelope(message="Medical record deleted successfully")

    def _content(
        self, request: CreateMedicalRecordRequest | UpdateMedicalRecordRequest
    ) -> dict[str, Any]:
        values = {
            attr: validate_text(getattr(request, attr), field)
            for attr, field in CONTENT_FIELDS.items()
        }
        values["date"] = validate_date(request.date, "date")
        return values

    def _require_pet(self, user: AuthenticatedUser, pet_id: int) -> None:
        if self._pets.get_owned(pet_id, user.id) is None:
            raise PetNotFoundError(pet_id, user.id)

    def _get_owned(self, user: AuthenticatedUser, record_id: int) -> MedicalRecord:
        record = self._records.get_owned(record_id, user.id)
        if record is None:
            raise MedicalRecordNotFoundError(record_id, user.id)
        return record
