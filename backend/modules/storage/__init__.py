"""
Storage module.

Uploads user-supplied images to Supabase Storage.

Public API:
- IImageStorage: Interface for image operations
- StorageBucket, Attachment, DecodedImage: Models
- Storage exceptions
"""

from .interfaces import IImageStorage
from .models import Attachment, DecodedImage, StorageBucket
from .exceptions import (
    InvalidImageError,
    ImageTooLargeError,
    ImageDecodeTimeoutError,
    StorageUploadError,
)

__all__ = [
    "IImageStorage",
    "Attachment",
    "DecodedImage",
    "StorageBucket",
    "InvalidImageError",
    "ImageTooLargeError",
    "ImageDecodeTimeoutError",
    "StorageUploadError",
]
