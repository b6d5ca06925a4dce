"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, PetPalError


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class InvalidCredentialsError(AuthenticationError):
    """Raised on login with an unknown email or a wrong password."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class ForbiddenError(AuthorizationError):
    """Raised when a non-administrator calls an admin-only endpoint."""

    def __init__(self, message: str = "Access denied. Admin privileges required."):
        super().__init__(message, code="FORBIDDEN")


class IssuanceError(PetPalError):
    """Raised when a token cannot be issued."""

    def __init__(self, message: str = "Could not issue authentication token"):
        super().__init__(message, code="TOKEN_ISSUANCE_FAILED")
