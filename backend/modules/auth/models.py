"""
Authentication module data models.

Request fields are all optional at the schema level so that a missing
field is reported by the field validator, naming the first one absent.
"""

from typing import Optional
from pydantic import Field

from shared.models import CamelModel, Envelope


class RegisterRequest(CamelModel):
    """Registration body."""

    full_name: Optional[str] = None
    gender: Optional[str] = None
    birthdate: Optional[str] = Field(None, description="ISO date, not in the future")
    email: Optional[str] = None
    password: Optional[str] = None
    profile_image: Optional[str] = Field(None, description="Base64 image or data URL")


class LoginRequest(CamelModel):
    """Login body."""

    email: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(Envelope):
    """Returned after a successful registration."""

    user_id: int


class LoginUser(CamelModel):
    """User details returned alongside a fresh token."""

    id: int
    full_name: str
    email: str
    profile_picture: Optional[str] = None


class LoginResponse(Envelope):
    """Returned after a successful login."""

    token: str
    is_admin: bool = False
    user: LoginUser
