"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST failures into the
application's exception hierarchy.
"""

import logging
from typing import Any, Optional, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DependencyError, DuplicateError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() which runs a query and maps driver errors
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PetRepository(BaseRepository[PetRecord]):
            def get_by_id(self, pet_id: int) -> Optional[PetRecord]:
                rows = self._execute(
                    self._db.table("pets").select("*").eq("id", pet_id),
                    "get pet",
                )
                return self._map_to_pet(rows[0]) if rows else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> list[dict[str, Any]]:
        """
        Execute a PostgREST query and return its rows.

        Args:
            query: A query builder ready for .execute().
            operation: Short description used in logs and error messages.

        Returns:
            The list of rows returned by the query (possibly empty).

        Raises:
            DuplicateError: If the statement violated a unique constraint.
            DependencyError: For any other database error.
        """
        try:
            result = query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateError(
                    f"Unique constraint violated during {operation}",
                    code="UNIQUE_VIOLATION",
                    details={"operation": operation},
                ) from e
            logger.error("Database error during %s: %s (code=%s)", operation, e.message, e.code)
            raise DependencyError(
                f"Database error during {operation}: {e.message}",
                service="database",
                details={"operation": operation, "db_code": e.code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Database unreachable during %s: %s", operation, e)
            raise DependencyError(
                f"Database unreachable during {operation}: {e}",
                service="database",
                details={"operation": operation},
            ) from e
        return result.data or []

    def _first(self, query: Any, operation: str) -> Optional[dict[str, Any]]:
        """Execute a query and return its first row, or None."""
        rows = self._execute(query, operation)
        return rows[0] if rows else None

    @staticmethod
    def _serialize(data: dict[str, Any]) -> dict[str, Any]:
        """Convert date and datetime values to ISO strings for the request body."""
        return {
            key: value.isoformat() if hasattr(value, "isoformat") else value
            for key, value in data.items()
        }
