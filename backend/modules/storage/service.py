"""
Image storage service backed by Supabase Storage.

Images are always secondary to the record they decorate. Callers create
their record first and then call attach(), which never raises: any failure
is logged and returned as a warning so the primary write stands.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx
from storage3.utils import StorageException
from supabase import Client

from shared.exceptions import PetPalError

from .exceptions import ImageDecodeTimeoutError, StorageUploadError
from .images import decode_image
from .interfaces import IImageStorage
from .models import Attachment, DecodedImage, StorageBucket

logger = logging.getLogger(__name__)

ATTACH_FAILED_WARNING = "Image could not be saved; the record was stored without it"


class ImageStorageService(IImageStorage):
    """
    Uploads base64 image payloads to Supabase Storage buckets.

    Decoding runs in a worker thread under a fixed timeout; uploads go
    through the service-role Supabase client.
    """

    def __init__(
        self,
        supabase_client: Client,
        max_bytes: int = 10 * 1024 * 1024,
        decode_timeout: float = 5.0,
    ):
        self._db = supabase_client
        self._max_bytes = max_bytes
        self._decode_timeout = decode_timeout

    async def decode(self, payload: str) -> DecodedImage:
        """
        Decode a base64 payload, giving up after the configured timeout.

        Raises:
            InvalidImageError: If the payload is malformed or too large.
            ImageDecodeTimeoutError: If decoding took too long.
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(decode_image, payload, self._max_bytes),
                timeout=self._decode_timeout,
            )
        except asyncio.TimeoutError as e:
            raise ImageDecodeTimeoutError(self._decode_timeout) from e

    def upload(self, image: DecodedImage, bucket: StorageBucket, file_stem: str) -> str:
        """
        Upload decoded image bytes and return the public URL.

        Existing objects with the same name are overwritten.

        Raises:
            StorageUploadError: If the storage service fails.
        """
        file_name = f"{file_stem}{image.extension}"
        logger.info("Uploading %s to bucket %s", file_name, bucket.value)
        try:
            store = self._db.storage.from_(bucket.value)
            store.upload(
                file_name,
                image.data,
                {"content-type": image.content_type, "upsert": "true"},
            )
            return store.get_public_url(file_name)
        except (StorageException, httpx.HTTPError) as e:
            raise StorageUploadError(bucket.value, file_name, str(e)) from e

    async def attach(
        self,
        payload: Optional[str],
        bucket: StorageBucket,
        file_stem: str,
        persist: Callable[[str], Any],
    ) -> Attachment:
        """
        Decode, upload, and record an image without failing the caller.

        Args:
            payload: Base64 image or data URL; None/empty means no image.
            bucket: Target bucket.
            file_stem: Object name without extension.
            persist: Called with the public URL to store it on the record;
                its return value is passed back as Attachment.record.

        Returns:
            Attachment with url/record on success, or a warning on failure.
        """
        if not payload:
            return Attachment()

        try:
            image = await self.decode(payload)
            url = self.upload(image, bucket, file_stem)
            record = persist(url)
        except PetPalError as e:
            logger.warning(
                "Image attachment to %s/%s failed, continuing without it: %s",
                bucket.value,
                file_stem,
                e.message,
            )
            return Attachment(warning=ATTACH_FAILED_WARNING)
        except Exception:
            logger.warning(
                "Unexpected error attaching image to %s/%s, continuing without it",
                bucket.value,
                file_stem,
                exc_info=True,
            )
            return Attachment(warning=ATTACH_FAILED_WARNING)

        logger.info("Image attached: %s", url)
        return Attachment(url=url, record=record)
