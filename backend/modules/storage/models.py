"""
Object storage data models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class StorageBucket(str, Enum):
    """Supabase Storage buckets, one per kind of image."""

    PROFILE_IMAGES = "profile-images"
    PET_IMAGES = "pet-images"
    POST_IMAGES = "post-images"
    SHOP_IMAGES = "shop-images"


@dataclass(frozen=True)
class DecodedImage:
    """Raw image bytes ready for upload."""

    data: bytes
    content_type: str
    extension: str


@dataclass
class Attachment:
    """
    Outcome of a best-effort image attachment.

    `url` and `record` are set on success; `warning` is set when any step
    failed and the primary record was left without an image.
    """

    url: Optional[str] = None
    record: Any = None
    warning: Optional[str] = None

    @property
    def attached(self) -> bool:
        return self.url is not None and self.warning is None
