"""
Medical records module exceptions.
"""

from typing import Any

from shared.exceptions import OwnershipError


class MedicalRecordNotFoundError(OwnershipError):
    """Raised when a record does not exist or belongs to someone else."""

    def __init__(self, record_id: Any, user_id: Any = None):
        super().__init__("Medical record", record_id, user_id)
