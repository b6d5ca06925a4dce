"""
Shop listing service.
"""

import logging
import time
from typing import Any, Optional

from shared.models import DataResponse, Envelope
from shared.validators import REQUIRED_FIELDS, require_fields, validate_range, validate_text
from modules.storage.interfaces import IImageStorage
from modules.storage.models import StorageBucket

from .exceptions import ShopNotFoundError
from .interfaces import IShopService
from .models import Shop, ShopRequest
from .repository import ShopRepository

logger = logging.getLogger(__name__)


def _optional_text(value: Optional[str]) -> Optional[str]:
    return (value.strip() or None) if value else None


class ShopService(IShopService):
    """Implementation of shop listing operations."""

    def __init__(self, shops: ShopRepository, images: IImageStorage):
        self._shops = shops
        self._images = images

    async def list_shops(self) -> DataResponse[list[Shop]]:
        return DataResponse[list[Shop]](data=self._shops.list_all())

    async def create_shop(self, request: ShopRequest) -> DataResponse[Shop]:
        shop = self._shops.create(self._validate(request))
        logger.info("Created shop %s", shop.id)

        shop, warning = await self._attach_image(shop, request.image_base64)
        return DataResponse[Shop](message="Shop created successfully", data=shop, warning=warning)

    async def update_shop(self, shop_id: int, request: ShopRequest) -> DataResponse[Shop]:
        values = self._validate(request)
        if self._shops.get_by_id(shop_id) is None:
            raise ShopNotFoundError(shop_id)

        shop = self._shops.update(shop_id, values)
        if shop is None:
            raise ShopNotFoundError(shop_id)
        logger.info("Updated shop %s", shop_id)

        shop, warning = await self._attach_image(shop, request.image_base64)
        return DataResponse[Shop](message="Shop updated successfully", data=shop, warning=warning)

    async def delete_shop(self, shop_id: int) -> Envelope:
        if self._shops.get_by_id(shop_id) is None:
            raise ShopNotFoundError(shop_id)
        self._shops.delete(shop_id)
        logger.info("Deleted shop %s", shop_id)
        return Envelope(message="Shop deleted successfully")

    def _validate(self, request: ShopRequest) -> dict[str, Any]:
        require_fields(request.model_dump(by_alias=True), REQUIRED_FIELDS["shop"])
        return {
            "name": validate_text(request.name, "name"),
            "type": validate_text(request.type, "type"),
            "latitude": validate_range(request.latitude, "latitude", -90, 90),
            "longitude": validate_range(request.longitude, "longitude", -180, 180),
            "contact_number": _optional_text(request.contact_number),
            "working_hours": _optional_text(request.working_hours),
            "working_days": _optional_text(request.working_days),
        }

    async def _attach_image(self, shop: Shop, payload: Optional[str]) -> tuple[Shop, Optional[str]]:
        attachment = await self._images.attach(
            payload,
            StorageBucket.SHOP_IMAGES,
            f"shop_{shop.id}_{int(time.time() * 1000)}",
            lambda url: self._shops.update(shop.id, {"image": url}),
        )
        return (attachment.record or shop), attachment.warning
