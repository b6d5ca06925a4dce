"""
Medical records module data models.
"""

from datetime import date as Date, datetime
from typing import Optional

from shared.models import CamelModel
from modules.pets.models import PetSummary


class MedicalRecord(CamelModel):
    """A vet visit or treatment recorded against a pet."""

    id: int
    user_id: int
    pet_id: int
    diagnose: str
    vet_name: str
    medication: str
    description: str
    date: Date
    created_at: Optional[datetime] = None
    pet: Optional[PetSummary] = None


class CreateMedicalRecordRequest(CamelModel):
    """Body for creating a medical record."""

    pet_id: Optional[int] = None
    diagnose: Optional[str] = None
    vet_name: Optional[str] = None
    medication: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None


class UpdateMedicalRecordRequest(CamelModel):
    """Body for replacing a medical record's contents. The pet cannot change."""

    diagnose: Optional[str] = None
    vet_name: Optional[str] = None
    medication: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
