"""
Users module exceptions.
"""

from shared.exceptions import DuplicateError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(DuplicateError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": email},
        )
