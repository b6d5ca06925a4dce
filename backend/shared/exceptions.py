"""
Base exception classes for the PetPal backend.

Each module should define its own exceptions that inherit from these bases.
Every class carries the HTTP status it maps to, so the API layer can turn
any of them into the standard JSON envelope without a lookup table.
"""

from typing import Optional, Any


class PetPalError(Exception):
    """
    Base exception for all PetPal errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PetPalError):
    """Input validation failed."""

    status_code = 400


class MissingFieldError(ValidationError):
    """A required request field is absent or blank."""

    def __init__(self, field: str):
        super().__init__(
            f"{field} is required",
            code="MISSING_FIELD",
            details={"field": field},
        )
        self.field = field


class InvalidFieldError(ValidationError):
    """A request field is present but malformed."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(
            message or f"Invalid value for {field}",
            code="INVALID_FIELD",
            details={"field": field},
        )
        self.field = field


class InvalidEmailError(ValidationError):
    """Email address does not look like local@domain.tld."""

    def __init__(self, message: str = "Please enter a valid email address"):
        super().__init__(message, code="INVALID_EMAIL", details={"field": "email"})


class WeakPasswordError(ValidationError):
    """Password does not meet the minimum length."""

    def __init__(self, message: str = "Password must be at least 6 characters long"):
        super().__init__(message, code="WEAK_PASSWORD", details={"field": "password"})


class InvalidBirthdateError(ValidationError):
    """Birthdate is unparsable or in the future."""

    def __init__(self, message: str = "Please enter a valid birthdate"):
        super().__init__(message, code="INVALID_BIRTHDATE", details={"field": "birthdate"})


class DuplicateError(PetPalError):
    """
    A unique value is already taken.

    Reported as 400 rather than 409; clients treat it like any other
    rejected submission.
    """

    status_code = 400


class AuthenticationError(PetPalError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(PetPalError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class OwnershipError(AuthorizationError):
    """
    Caller does not own the resource.

    Surfaces as 404 with the same message as a missing resource so that
    non-owners cannot discover which ids exist.
    """

    status_code = 404

    def __init__(self, resource: str, resource_id: Any, user_id: Any):
        super().__init__(
            f"{resource} not found",
            code=f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id


class NotFoundError(PetPalError):
    """Resource not found."""

    status_code = 404


class MethodNotAllowedError(PetPalError):
    """HTTP verb not supported by the route."""

    status_code = 405

    def __init__(self, method: str):
        super().__init__(
            "Method not allowed",
            code="METHOD_NOT_ALLOWED",
            details={"method": method},
        )


class ConfigurationError(PetPalError):
    """Server is missing required configuration."""

    status_code = 500


class DependencyError(PetPalError):
    """
    Error communicating with the database or object storage.

    The message is for operators; the API layer replaces it with a
    generic one before it reaches the client.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
