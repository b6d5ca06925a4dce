"""Tests for the Supabase Storage image service."""

import base64
from unittest.mock import MagicMock

import httpx
import pytest
from storage3.utils import StorageException

from modules.storage.exceptions import ImageDecodeTimeoutError, StorageUploadError
from modules.storage.models import DecodedImage, StorageBucket
from modules.storage.service import ATTACH_FAILED_WARNING, ImageStorageService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PNG_PAYLOAD = base64.b64encode(PNG_BYTES).decode("ascii")
PUBLIC_URL = "https://test.supabase.co/storage/v1/object/public/pet-images/pet_1.png"


@pytest.fixture
def mock_db() -> MagicMock:
    db = MagicMock()
    db.storage.from_.return_value.get_public_url.return_value = PUBLIC_URL
    return db


@pytest.fixture
def service(mock_db) -> ImageStorageService:
    return ImageStorageService(mock_db, max_bytes=1024, decode_timeout=5.0)


class TestUpload:
    def test_uploads_with_extension_and_type(self, service, mock_db):
        image = DecodedImage(data=PNG_BYTES, content_type="image/png", extension=".png")

        url = service.upload(image, StorageBucket.PET_IMAGES, "pet_1")

        assert url == PUBLIC_URL
        mock_db.storage.from_.assert_called_with("pet-images")
        bucket = mock_db.storage.from_.return_value
        name, data, options = bucket.upload.call_args.args
        assert name == "pet_1.png"
        assert data == PNG_BYTES
        assert options["content-type"] == "image/png"
        bucket.get_public_url.assert_called_once_with("pet_1.png")

    def test_storage_failure(self, service, mock_db):
        mock_db.storage.from_.return_value.upload.side_effect = StorageException("bucket missing")
        image = DecodedImage(data=PNG_BYTES, content_type="image/png", extension=".png")

        with pytest.raises(StorageUploadError) as exc_info:
            service.upload(image, StorageBucket.PET_IMAGES, "pet_1")
        assert exc_info.value.service == "storage"

    def test_network_failure(self, service, mock_db):
        mock_db.storage.from_.return_value.upload.side_effect = httpx.ConnectError("down")
        image = DecodedImage(data=PNG_BYTES, content_type="image/png", extension=".png")

        with pytest.raises(StorageUploadError):
            service.upload(image, StorageBucket.PET_IMAGES, "pet_1")


class TestDecode:
    @pytest.mark.asyncio
    async def test_decodes_in_worker(self, service):
        image = await service.decode(PNG_PAYLOAD)
        assert image.content_type == "image/png"

    @pytest.mark.asyncio
    async def test_timeout(self, mock_db, monkeypatch):
        import time

        def slow_decode(payload, max_bytes):
            time.sleep(0.2)

        monkeypatch.setattr("modules.storage.service.decode_image", slow_decode)
        service = ImageStorageService(mock_db, decode_timeout=0.01)

        with pytest.raises(ImageDecodeTimeoutError):
            await service.decode(PNG_PAYLOAD)


class TestAttach:
    @pytest.mark.asyncio
    async def test_no_payload_is_a_no_op(self, service, mock_db):
        persist = MagicMock()

        attachment = await service.attach(None, StorageBucket.PET_IMAGES, "pet_1", persist)

        assert attachment.url is None
        assert attachment.warning is None
        persist.assert_not_called()
        mock_db.storage.from_.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_persists_url(self, service):
        persist = MagicMock(return_value={"id": 1, "pet_picture": PUBLIC_URL})

        attachment = await service.attach(PNG_PAYLOAD, StorageBucket.PET_IMAGES, "pet_1", persist)

        persist.assert_called_once_with(PUBLIC_URL)
        assert attachment.attached is True
        assert attachment.record == {"id": 1, "pet_picture": PUBLIC_URL}

    @pytest.mark.asyncio
    async def test_bad_payload_gives_warning(self, service):
        persist = MagicMock()

        attachment = await service.attach("%%%not-base64%%%", StorageBucket.PET_IMAGES, "pet_1", persist)

        assert attachment.warning == ATTACH_FAILED_WARNING
        assert attachment.attached is False
        persist.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_failure_gives_warning(self, service, mock_db):
        mock_db.storage.from_.return_value.upload.side_effect = StorageException("denied")
        persist = MagicMock()

        attachment = await service.attach(PNG_PAYLOAD, StorageBucket.PET_IMAGES, "pet_1", persist)

        assert attachment.warning == ATTACH_FAILED_WARNING
        persist.assert_not_called()

    @pytest.mark.asyncio
    async def test_oversized_payload_gives_warning(self, service):
        big = base64.b64encode(b"\x00" * 4096).decode("ascii")

        attachment = await service.attach(big, StorageBucket.PET_IMAGES, "pet_1", MagicMock())

        assert attachment.warning == ATTACH_FAILED_WARNING

    @pytest.mark.asyncio
    async def test_unexpected_client_error_gives_warning(self, service, mock_db):
        mock_db.storage.from_.return_value.upload.side_effect = RuntimeError("storage client blew up")
        persist = MagicMock()

        attachment = await service.attach(PNG_PAYLOAD, StorageBucket.PET_IMAGES, "pet_1", persist)

        assert attachment.warning == ATTACH_FAILED_WARNING
        assert attachment.url is None
        persist.assert_not_called()

    @pytest.mark.asyncio
    async def test_persist_failure_gives_warning(self, service):
        persist = MagicMock(side_effect=RuntimeError("row vanished"))

        attachment = await service.attach(PNG_PAYLOAD, StorageBucket.PET_IMAGES, "pet_1", persist)

        assert attachment.warning == ATTACH_FAILED_WARNING
        assert attachment.record is None
