"""
Admin module data models.
"""

from datetime import date
from typing import Optional
from pydantic import Field

from shared.models import CamelModel, Envelope


class AdminUser(CamelModel):
    """A user as listed to administrators."""

    id: int
    full_name: str
    gender: str
    birthdate: Optional[date] = None
    email: str
    is_admin: bool = False


class GenderCount(CamelModel):
    gender: str
    count: int


class PetTypeCount(CamelModel):
    type: str
    count: int


class StatsResponse(Envelope):
    """User and pet breakdowns for the admin dashboard."""

    user_gender_stats: list[GenderCount] = Field(default_factory=list)
    pet_type_stats: list[PetTypeCount] = Field(default_factory=list)
