"""
User repository for database access.

Encapsulates all Supabase queries for the `users` table.
"""

from typing import Any, Optional

from shared.exceptions import DuplicateError
from shared.repository import BaseRepository

from .exceptions import EmailAlreadyExistsError
from .models import UserRecord

TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Emails are stored lower-cased; callers normalize before querying.
    The unique index on users.email is the final word on duplicates.
    """

    def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        row = self._first(
            self._db.table(TABLE).select("*").eq("id", user_id),
            "get user",
        )
        return self._map_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        row = self._first(
            self._db.table(TABLE).select("*").eq("email", email),
            "get user by email",
        )
        return self._map_to_user(row) if row else None

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a user row.

        Args:
            data: Column values; `birthdate` may be a date.

        Raises:
            EmailAlreadyExistsError: If the email is already registered.
        """
        try:
            rows = self._execute(
                self._db.table(TABLE).insert(self._serialize(data)),
                "create user",
            )
        except DuplicateError as e:
            raise EmailAlreadyExistsError(data.get("email", "")) from e
        return self._map_to_user(rows[0])

    def update(self, user_id: int, data: dict[str, Any]) -> Optional[UserRecord]:
        """Update columns of a user; returns None if no row matched."""
        row = self._first(
            self._db.table(TABLE).update(self._serialize(data)).eq("id", user_id),
            "update user",
        )
        return self._map_to_user(row) if row else None

    def list_all(self) -> list[UserRecord]:
        rows = self._execute(
            self._db.table(TABLE).select("*").order("created_at", desc=True),
            "list users",
        )
        return [self._map_to_user(r) for r in rows]

    def delete(self, user_id: int) -> None:
        self._execute(self._db.table(TABLE).delete().eq("id", user_id), "delete user")

    def ping(self) -> None:
        """Run a trivial query; raises DependencyError if the database is down."""
        self._execute(self._db.table(TABLE).select("id").limit(1), "ping")

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_user(data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=data["id"],
            full_name=data["full_name"],
            gender=data["gender"],
            birthdate=data.get("birthdate"),
            email=data["email"],
            password_hash=data["password"],
            profile_picture=data.get("profile_picture"),
            is_admin=bool(data.get("is_admin", False)),
            created_at=data.get("created_at"),
        )
