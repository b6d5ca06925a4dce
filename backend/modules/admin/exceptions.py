"""
Admin module exceptions.
"""

from typing import Any

from shared.exceptions import ValidationError


class CannotDeleteAdminError(ValidationError):
    """Raised when an administrator account is targeted for deletion."""

    def __init__(self, user_id: Any):
        super().__init__(
            "Cannot delete admin users",
            code="CANNOT_DELETE_ADMIN",
            details={"user_id": user_id},
        )
