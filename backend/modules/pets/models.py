"""
Pets module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Pet(CamelModel):
    """A pet profile owned by one user."""

    id: int
    user_id: int
    name: str
    age: int
    type: str
    breed: str
    pet_picture: Optional[str] = None
    created_at: Optional[datetime] = None


class PetSummary(CamelModel):
    """Pet details embedded in medical records and notifications."""

    id: int
    name: str
    type: str
    breed: str
    pet_picture: Optional[str] = None


class CreatePetRequest(CamelModel):
    """Body for creating a pet."""

    name: Optional[str] = None
    age: Optional[int] = Field(None, description="Age in years")
    type: Optional[str] = None
    breed: Optional[str] = None
    image_base64: Optional[str] = Field(None, description="Base64 image or data URL")


class UpdatePetRequest(CamelModel):
    """
    Body for updating a pet.

    Every field is optional; omitted fields keep their stored value.
    """

    name: Optional[str] = None
    age: Optional[int] = None
    type: Optional[str] = None
    breed: Optional[str] = None
    image_base64: Optional[str] = Field(None, description="Base64 image or data URL")
