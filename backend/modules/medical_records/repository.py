"""
Medical record repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.pets.models import PetSummary

from .models import MedicalRecord

TABLE = "medical_records"
WITH_PET = "*, pets(id, name, type, breed, pet_picture)"


class MedicalRecordRepository(BaseRepository[MedicalRecord]):
    """Repository for the `medical_records` table."""

    def create(self, data: dict[str, Any]) -> MedicalRecord:
        rows = self._execute(
            self._db.table(TABLE).insert(self._serialize(data)),
            "create medical record",
        )
        return self._map_to_record(rows[0])

    def get_owned(self, record_id: int, user_id: int) -> Optional[MedicalRecord]:
        """Get a record, with its pet, only if it belongs to `user_id`."""
        row = self._first(
            self._db.table(TABLE).select(WITH_PET).eq("id", record_id).eq("user_id", user_id),
            "get medical record",
        )
        return self._map_to_record(row) if row else None

    def list_for_pet(self, pet_id: int, user_id: int) -> list[MedicalRecord]:
        rows = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("pet_id", pet_id)
            .eq("user_id", user_id)
            .order("date", desc=True),
            "list medical records",
        )
        return [self._map_to_record(r) for r in rows]

    def list_by_user(self, user_id: int) -> list[MedicalRecord]:
        rows = self._execute(
            self._db.table(TABLE)
            .select(WITH_PET)
            .eq("user_id", user_id)
            .order("date", desc=True),
            "list user medical records",
        )
        return [self._map_to_record(r) for r in rows]

    def update(self, record_id: int, data: dict[str, Any]) -> Optional[MedicalRecord]:
        row = self._first(
            self._db.table(TABLE).update(self._serialize(data)).eq("id", record_id),
            "update medical record",
        )
        return self._map_to_record(row) if row else None

    def delete(self, record_id: int) -> None:
        self._execute(self._db.table(TABLE).delete().eq("id", record_id), "delete medical record")

    @staticmethod
    def _map_to_record(data: dict[str, Any]) -> MedicalRecord:
        """Map database row (optionally with embedded pet) to MedicalRecord."""
        pet = data.get("pets")
        return MedicalRecord(
            id=data["id"],
            user_id=data["user_id"],
            pet_id=data["pet_id"],
            diagnose=data["diagnose"],
            vet_name=data["vet_name"],
            medication=data["medication"],
            description=data["description"],
            date=data["date"],
            created_at=data.get("created_at"),
            pet=PetSummary(**pet) if pet else None,
        )
