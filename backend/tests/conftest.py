"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

import pytest

from api.dependencies import reset_container
from modules.auth.tokens import TokenService
from modules.storage.models import Attachment
from modules.storage.service import ATTACH_FAILED_WARNING
from modules.users.exceptions import EmailAlreadyExistsError
from modules.users.models import UserRecord
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: int = 1,
    is_admin: bool = False,
    issued_at: Optional[datetime] = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a signed session token for authentication.

    Args:
        user_id: User ID to put in `sub`
        is_admin: Admin flag to embed
        issued_at: Issue time; a time more than 24 hours ago gives an expired token
        secret: Signing secret
    """
    return TokenService(secret).issue(user_id, is_admin, issued_at=issued_at)


def make_user_record(
    user_id: int = 1,
    email: str = "jo@example.com",
    is_admin: bool = False,
    **overrides: Any,
) -> UserRecord:
    """Helper to create a users row model."""
    values = {
        "id": user_id,
        "full_name": "Jo Lee",
        "gender": "female",
        "birthdate": date(1990, 5, 1),
        "email": email,
        "password_hash": "$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnot",
        "is_admin": is_admin,
    }
    values.update(overrides)
    return UserRecord(**values)


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository."""

    def __init__(self) -> None:
        self.rows: dict[int, UserRecord] = {}
        self._next_id = 1

    def add(self, record: UserRecord) -> UserRecord:
        self.rows[record.id] = record
        self._next_id = max(self._next_id, record.id + 1)
        return record

    def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        return self.rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def create(self, data: dict[str, Any]) -> UserRecord:
        if self.get_by_email(data["email"]) is not None:
            raise EmailAlreadyExistsError(data["email"])
        values = dict(data)
        values["password_hash"] = values.pop("password")
        record = UserRecord(id=self._next_id, **values)
        return self.add(record)

    def update(self, user_id: int, data: dict[str, Any]) -> Optional[UserRecord]:
        record = self.rows.get(user_id)
        if record is None:
            return None
        self.rows[user_id] = record.model_copy(update=data)
        return self.rows[user_id]

    def list_all(self) -> list[UserRecord]:
        return list(self.rows.values())

    def delete(self, user_id: int) -> None:
        self.rows.pop(user_id, None)

    def ping(self) -> None:
        return None


class RecordingImageStorage:
    """
    Stand-in for ImageStorageService.

    Mirrors attach(): no payload means no image, `fail=True` simulates a
    storage outage, otherwise persist() is called with a fake public URL.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    async def attach(self, payload, bucket, file_stem, persist) -> Attachment:
        if not payload:
            return Attachment()
        self.calls.append((bucket.value, file_stem))
        if self.fail:
            return Attachment(warning=ATTACH_FAILED_WARNING)
        url = f"https://storage.test/{bucket.value}/{file_stem}.png"
        return Attachment(url=url, record=persist(url))


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def user() -> AuthenticatedUser:
    """The calling user for service tests."""
    return AuthenticatedUser(id=1)


@pytest.fixture
def other_user() -> AuthenticatedUser:
    return AuthenticatedUser(id=2)


@pytest.fixture
def user_store() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def images() -> RecordingImageStorage:
    return RecordingImageStorage()


@pytest.fixture
def failing_images() -> RecordingImageStorage:
    return RecordingImageStorage(fail=True)


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for user 1."""
    return create_test_token(user_id=1)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_token():
    """Factory fixture for signed tokens; see create_test_token."""
    return create_test_token


@pytest.fixture
def make_user():
    """Factory fixture for users rows; see make_user_record."""
    return make_user_record
