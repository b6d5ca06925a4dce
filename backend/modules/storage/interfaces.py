"""
Storage module interface.

Services that decorate records with images depend on IImageStorage so
tests can substitute a fake without a Supabase project.
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .models import Attachment, DecodedImage, StorageBucket


@runtime_checkable
class IImageStorage(Protocol):
    """Interface for image upload operations."""

    async def decode(self, payload: str) -> DecodedImage:
        """Decode a base64 image payload."""
        ...

    def upload(self, image: DecodedImage, bucket: StorageBucket, file_stem: str) -> str:
        """Upload an image and return its public URL."""
        ...

    async def attach(
        self,
        payload: Optional[str],
        bucket: StorageBucket,
        file_stem: str,
        persist: Callable[[str], Any],
    ) -> Attachment:
        """Best-effort decode + upload + persist; never raises."""
        ...
