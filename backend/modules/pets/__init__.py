"""
Pets module.

Pet profiles owned by users.

Public API:
- IPetService: Interface for pet operations
- PetRepository: Data access for the pets table
- Pet, PetSummary: Models
- PetNotFoundError
"""

from .interfaces import IPetService
from .models import CreatePetRequest, Pet, PetSummary, UpdatePetRequest
from .repository import PetRepository
from .exceptions import PetNotFoundError

__all__ = [
    "IPetService",
    "PetRepository",
    "CreatePetRequest",
    "Pet",
    "PetSummary",
    "UpdatePetRequest",
    "PetNotFoundError",
]
