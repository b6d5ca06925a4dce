"""
Error response models.

Standardized error envelope for the API.
"""

from typing import Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    message: str
    error: str
    details: Optional[dict[str, Any]] = None
