"""
Shop repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Shop

TABLE = "shops"


class ShopRepository(BaseRepository[Shop]):
    """Repository for the `shops` table."""

    def create(self, data: dict[str, Any]) -> Shop:
        rows = self._execute(self._db.table(TABLE).insert(data), "create shop")
        return self._map_to_shop(rows[0])

    def get_by_id(self, shop_id: int) -> Optional[Shop]:
        row = self._first(self._db.table(TABLE).select("*").eq("id", shop_id), "get shop")
        return self._map_to_shop(row) if row else None

    def list_all(self) -> list[Shop]:
        rows = self._execute(
            self._db.table(TABLE).select("*").order("created_at", desc=True),
            "list shops",
        )
        return [self._map_to_shop(r) for r in rows]

    def update(self, shop_id: int, data: dict[str, Any]) -> Optional[Shop]:
        row = self._first(self._db.table(TABLE).update(data).eq("id", shop_id), "update shop")
        return self._map_to_shop(row) if row else None

    def delete(self, shop_id: int) -> None:
        self._execute(self._db.table(TABLE).delete().eq("id", shop_id), "delete shop")

    @staticmethod
    def _map_to_shop(data: dict[str, Any]) -> Shop:
        """Map database row to Shop model."""
        return Shop(
            id=data["id"],
            name=data["name"],
            type=data["type"],
            latitude=data["latitude"],
            longitude=data["longitude"],
            contact_number=data.get("contact_number"),
            working_hours=data.get("working_hours"),
            working_days=data.get("working_days"),
            image=data.get("image"),
            created_at=data.get("created_at"),
        )
