"""
Shops module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Shop(CamelModel):
    """A pet shop, clinic or similar place shown on the map."""

    id: int
    name: str
    type: str
    latitude: float
    longitude: float
    contact_number: Optional[str] = None
    working_hours: Optional[str] = None
    working_days: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None


class ShopRequest(CamelModel):
    """Body for creating or replacing a shop."""

    name: Optional[str] = None
    type: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    contact_number: Optional[str] = None
    working_hours: Optional[str] = None
    working_days: Optional[str] = None
    image_base64: Optional[str] = Field(None, description="Base64 image or data URL")
