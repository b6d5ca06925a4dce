"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base model for API payloads.

    Fields are snake_case in Python and camelCase on the wire. Both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection. The admin flag is
    whatever the token said at issuance; admin-only routes re-read it
    from the database.
    """

    id: int = Field(..., description="User ID")
    is_admin: bool = Field(default=False, description="Admin flag from the token")

    model_config = {"frozen": True}  # Make immutable for safety


class Envelope(CamelModel):
    """
    Standard response envelope.

    Every endpoint answers with this shape, success or failure.
    """

    success: bool = True
    message: Optional[str] = None
    warning: Optional[str] = Field(
        None, description="Set when a best-effort step (image upload) failed"
    )


class DataResponse(Envelope, Generic[T]):
    """Envelope carrying a payload under `data`."""

    data: T
