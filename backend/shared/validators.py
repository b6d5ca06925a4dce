"""
Request field validation.

Pure, synchronous checks run before anything is persisted. Each function
returns the normalized value or raises a specific ValidationError
subclass. Nothing here touches the database: uniqueness checks belong to
the services, since they need a round trip and report a different error.
"""

import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any, Optional

from .exceptions import (
    InvalidBirthdateError,
    InvalidEmailError,
    InvalidFieldError,
    MissingFieldError,
    WeakPasswordError,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6

# Mandatory request keys per resource, checked in this order.
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "registration": ("fullName", "gender", "birthdate", "email", "password"),
    "login": ("email", "password"),
    "profile_update": ("fullName",),
    "pet": ("name", "age", "type", "breed"),
    "medical_record": ("petId", "diagnose", "vetName", "medication", "description", "date"),
    "medical_record_update": ("diagnose", "vetName", "medication", "description", "date"),
    "task": ("petId", "type", "frequency", "time"),
    "post": (),
    "comment": ("postId", "content"),
    "reply": ("commentId", "content"),
    "shop": ("name", "type", "latitude", "longitude"),
}


# Compared untrimmed: whitespace counts as a value here.
UNTRIMMED_FIELDS = frozenset({"password"})


def _is_blank(value: Any, field: str) -> bool:
    if value is None or value == "":
        return True
    return field not in UNTRIMMED_FIELDS and isinstance(value, str) and not value.strip()


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """
    Check that every field in `fields` is present and non-blank.

    Args:
        data: Submitted fields keyed by their wire name.
        fields: Field names in the order they should be checked.

    Raises:
        MissingFieldError: Naming the first missing or blank field.
    """
    for field in fields:
        if _is_blank(data.get(field), field):
            raise MissingFieldError(field)


def validate_email(value: Optional[str]) -> str:
    """Trim and lower-case an email address, then check its shape."""
    if not isinstance(value, str):
        raise InvalidEmailError()
    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailError()
    return email


def validate_password(value: Optional[str]) -> str:
    """Enforce the minimum password length. No maximum, no complexity rules."""
    if not value or len(value) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError()
    return value


def _parse_iso(value: str) -> datetime:
    text = value.strip()
    try:
        return datetime.combine(date.fromisoformat(text), datetime.min.time())
    except ValueError:
        pass
    # datetime.fromisoformat only accepts a trailing Z from 3.11 on
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def validate_birthdate(value: Any, today: Optional[date] = None) -> date:
    """
    Parse a birthdate and reject dates after today.

    Args:
        value: ISO date or datetime string, or a date.
        today: Reference date; defaults to the server's current date.
    """
    today = today or date.today()
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = _parse_iso(value).date()
        except ValueError:
            raise InvalidBirthdateError()
    else:
        raise InvalidBirthdateError()

    if parsed > today:
        raise InvalidBirthdateError()
    return parsed


def validate_date(value: Any, field: str) -> date:
    """Parse an ISO date (or datetime, keeping the date part)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return _parse_iso(value).date()
        except ValueError:
            pass
    raise InvalidFieldError(field, f"{field} must be a valid date")


def validate_datetime(value: Any, field: str) -> datetime:
    """Parse an ISO datetime. Naive values are taken as UTC."""
    parsed: Optional[datetime] = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = _parse_iso(value)
        except ValueError:
            parsed = None
    if parsed is None:
        raise InvalidFieldError(field, f"{field} must be a valid date and time")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_choice(value: Any, allowed: Iterable[str], field: str) -> str:
    """Check that `value` is one of `allowed`."""
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidFieldError(field, f"{field} must be one of: {', '.join(allowed)}")
    return value


def validate_text(value: Any, field: str) -> str:
    """Trim a free-text field and reject it if nothing is left."""
    if _is_blank(value, field):
        raise MissingFieldError(field)
    return str(value).strip()


def validate_range(
    value: float,
    field: str,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> float:
    """Check that a number falls within the inclusive bounds given."""
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise InvalidFieldError(field, f"{field} is out of range")
    return value
