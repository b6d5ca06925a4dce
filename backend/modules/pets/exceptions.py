"""
Pets module exceptions.
"""

from typing import Any

from shared.exceptions import OwnershipError


class PetNotFoundError(OwnershipError):
    """
    Raised when a pet does not exist or belongs to someone else.

    Both cases read the same to the client.
    """

    def __init__(self, pet_id: Any, user_id: Any = None):
        super().__init__("Pet", pet_id, user_id)
