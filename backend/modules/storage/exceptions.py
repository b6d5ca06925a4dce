"""
Storage module exceptions.
"""

from shared.exceptions import DependencyError, ValidationError


class InvalidImageError(ValidationError):
    """Raised when an image payload cannot be decoded."""

    def __init__(self, message: str = "Invalid image data"):
        super().__init__(message, code="INVALID_IMAGE")


class ImageTooLargeError(InvalidImageError):
    """Raised when a decoded image exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Image is {size} bytes; the limit is {limit} bytes")
        self.details = {"size": size, "limit": limit}


class ImageDecodeTimeoutError(InvalidImageError):
    """Raised when decoding an image takes longer than allowed."""

    def __init__(self, timeout: float):
        super().__init__(f"Image decoding exceeded {timeout:g}s")
        self.details = {"timeout": timeout}


class StorageUploadError(DependencyError):
    """Raised when the object storage service rejects or fails an upload."""

    def __init__(self, bucket: str, file_name: str, reason: str):
        super().__init__(
            f"Upload of {file_name} to {bucket} failed: {reason}",
            service="storage",
            code="STORAGE_UPLOAD_FAILED",
            details={"bucket": bucket, "file_name": file_name},
        )
