"""
Task repository for database access.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from modules.pets.models import PetSummary

from .models import Task

TABLE = "tasks"
WITH_PET = "*, pets(id, name, type, breed, pet_picture)"


class TaskRepository(BaseRepository[Task]):
    """Repository for the `tasks` table."""

    def create(self, data: dict[str, Any]) -> Task:
        rows = self._execute(self._db.table(TABLE).insert(self._serialize(data)), "create task")
        return self._map_to_task(rows[0])

    def get_owned(self, task_id: int, user_id: int) -> Optional[Task]:
        row = self._first(
            self._db.table(TABLE).select("*").eq("id", task_id).eq("user_id", user_id),
            "get task",
        )
        return self._map_to_task(row) if row else None

    def find_by_type(self, user_id: int, pet_id: int, task_type: str) -> Optional[Task]:
        """Find the caller's task of a given type for a pet, if any."""
        row = self._first(
            self._db.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("pet_id", pet_id)
            .eq("type", task_type)
            .limit(1),
            "find task by type",
        )
        return self._map_to_task(row) if row else None

    def list_by_user(self, user_id: int, pet_id: Optional[int] = None) -> list[Task]:
        query = self._db.table(TABLE).select("*").eq("user_id", user_id)
        if pet_id is not None:
            query = query.eq("pet_id", pet_id)
        rows = self._execute(query.order("id"), "list tasks")
        return [self._map_to_task(r) for r in rows]

    def list_due(self, user_id: int, now: datetime) -> list[Task]:
        """Tasks whose time is at or before `now`, each with its pet."""
        rows = self._execute(
            self._db.table(TABLE)
            .select(WITH_PET)
            .eq("user_id", user_id)
            .lte("time", now.isoformat())
            .order("time"),
            "list due tasks",
        )
        return [self._map_to_task(r) for r in rows]

    def update(self, task_id: int, data: dict[str, Any]) -> Optional[Task]:
        row = self._first(
            self._db.table(TABLE).update(self._serialize(data)).eq("id", task_id),
            "update task",
        )
        return self._map_to_task(row) if row else None

    def delete(self, task_id: int) -> None:
        self._execute(self._db.table(TABLE).delete().eq("id", task_id), "delete task")

    @staticmethod
    def _map_to_task(data: dict[str, Any]) -> Task:
        """Map database row to Task model."""
        pet = data.get("pets")
        return Task(
            id=data["id"],
            user_id=data["user_id"],
            pet_id=data["pet_id"],
            type=data["type"],
            description=data["description"],
            time=data["time"],
            frequency=data["frequency"],
            created_at=data.get("created_at"),
            pet=PetSummary(**pet) if pet else None,
        )
