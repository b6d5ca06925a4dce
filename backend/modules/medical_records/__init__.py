"""
Medical records module.

Vet visits and treatments recorded against a user's pets.

Public API:
- IMedicalRecordService: Interface for medical record operations
- MedicalRecordRepository: Data access for the medical_records table
- MedicalRecord: Model
- MedicalRecordNotFoundError
"""

from .interfaces import IMedicalRecordService
from .models import CreateMedicalRecordRequest, MedicalRecord, UpdateMedicalRecordRequest
from .repository import MedicalRecordRepository
from .exceptions import MedicalRecordNotFoundError

__all__ = [
    "IMedicalRecordService",
    "MedicalRecordRepository",
    "CreateMedicalRecordRequest",
    "MedicalRecord",
    "UpdateMedicalRecordRequest",
    "MedicalRecordNotFoundError",
]
