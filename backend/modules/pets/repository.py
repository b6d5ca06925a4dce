"""
Pet repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Pet

TABLE = "pets"


class PetRepository(BaseRepository[Pet]):
    """Repository for the `pets` table."""

    def create(self, data: dict[str, Any]) -> Pet:
        rows = self._execute(self._db.table(TABLE).insert(data), "create pet")
        return self._map_to_pet(rows[0])

    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        row = self._first(
            self._db.table(TABLE).select("*").eq("id", pet_id),
            "get pet",
        )
        return self._map_to_pet(row) if row else None

    def get_owned(self, pet_id: int, user_id: int) -> Optional[Pet]:
        """Get a pet only if it belongs to `user_id`."""
        row = self._first(
            self._db.table(TABLE).select("*").eq("id", pet_id).eq("user_id", user_id),
            "get owned pet",
        )
        return self._map_to_pet(row) if row else None

    def list_by_user(self, user_id: int) -> list[Pet]:
        rows = self._execute(
            self._db.table(TABLE).select("*").eq("user_id", user_id).order("id"),
            "list pets",
        )
        return [self._map_to_pet(r) for r in rows]

    def list_all(self) -> list[Pet]:
        rows = self._execute(self._db.table(TABLE).select("*").order("id"), "list all pets")
        return [self._map_to_pet(r) for r in rows]

    def update(self, pet_id: int, data: dict[str, Any]) -> Optional[Pet]:
        row = self._first(
            self._db.table(TABLE).update(data).eq("id", pet_id),
            "update pet",
        )
        return self._map_to_pet(row) if row else None

    def delete(self, pet_id: int) -> None:
        """Delete a pet together with its tasks and medical records."""
        self._execute(self._db.table("tasks").delete().eq("pet_id", pet_id), "delete pet tasks")
        self._execute(
            self._db.table("medical_records").delete().eq("pet_id", pet_id),
            "delete pet medical records",
        )
        self._execute(self._db.table(TABLE).delete().eq("id", pet_id), "delete pet")

    @staticmethod
    def _map_to_pet(data: dict[str, Any]) -> Pet:
        """Map database row to Pet model."""
        return Pet(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            age=data["age"],
            type=data["type"],
            breed=data["breed"],
            pet_picture=data.get("pet_picture"),
            created_at=data.get("created_at"),
        )
