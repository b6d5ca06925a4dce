"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account registration and login.
    """

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Create a user account.

        Args:
            request: Registration fields, optionally with a profile image

        Returns:
            RegisterResponse with the new user id, and a warning if the
            profile image could not be stored

        Raises:
            ValidationError: If a field is missing or invalid
            EmailAlreadyExistsError: If the email is taken
            DependencyError: If the database is unavailable
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Check credentials and issue a session token.

        Raises:
            ValidationError: If a field is missing or the email is malformed
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        ...
