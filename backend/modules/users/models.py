"""
User module data models.

UserRecord mirrors a `users` row and never leaves the backend (it carries
the password digest). The API models below are what clients see.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel


class UserRecord(BaseModel):
    """A row of the users table."""

    id: int
    full_name: str
    gender: str
    birthdate: Optional[date] = None
    email: str
    password_hash: str = Field(..., repr=False)
    profile_picture: Optional[str] = None
    is_admin: bool = False
    created_at: Optional[datetime] = None


class UserSummary(CamelModel):
    """Author info embedded in posts, comments and replies."""

    id: int
    full_name: str
    profile_picture: Optional[str] = None


class UserProfile(CamelModel):
    """A user's own profile, or an entry in the admin user list."""

    id: int
    full_name: str
    gender: str
    birthdate: Optional[date] = None
    email: str
    profile_picture: Optional[str] = None
    is_admin: bool = False

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserProfile":
        return cls(
            id=record.id,
            full_name=record.full_name,
            gender=record.gender,
            birthdate=record.birthdate,
            email=record.email,
            profile_picture=record.profile_picture,
            is_admin=record.is_admin,
        )


class UpdateProfileRequest(CamelModel):
    """
    Profile update body.

    Only full_name is mandatory; omitted fields keep their stored value.
    """

    full_name: Optional[str] = None
    gender: Optional[str] = None
    birthdate: Optional[str] = None
    profile_image: Optional[str] = Field(None, description="Base64 image or data URL")
