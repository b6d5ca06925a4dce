"""
Admin repository for cross-table maintenance queries.
"""

from typing import Any

from shared.repository import BaseRepository

# Tables holding a user's own rows, in deletion order.
USER_OWNED_TABLES = ("replies", "comments", "posts", "tasks", "medical_records", "pets")


class AdminRepository(BaseRepository[dict[str, Any]]):
    """Queries that span several modules' tables."""

    def delete_user_content(self, user_id: int) -> None:
        """Delete every row a user owns, children before parents."""
        for table in USER_OWNED_TABLES:
            self._execute(
                self._db.table(table).delete().eq("user_id", user_id),
                f"delete user {table}",
            )

    def user_genders(self) -> list[str]:
        rows = self._execute(self._db.table("users").select("gender"), "user gender stats")
        return [r["gender"] for r in rows]

    def pet_types(self) -> list[str]:
        rows = self._execute(self._db.table("pets").select("type"), "pet type stats")
        return [r["type"] for r in rows]
